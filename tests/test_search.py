import pytest

from reindeer.errors import SearchLimitExceededError, UnreachableGoalError
from reindeer.graph import PredecessorRelation
from reindeer.planner import SearchConfig, SearchEngine
from reindeer.types import ADVANCE_COST, ROTATE_COST, CostStampedState, Heading, State
from reindeer.utils.maze_map import parse_maze

OPEN_ROOM = "\n".join(
    [
        "######",
        "#...E#",
        "#....#",
        "#....#",
        "#S...#",
        "######",
    ]
)

TWIN_CORRIDORS = "\n".join(
    [
        "#######",
        "#.....#",
        "#.###.#",
        "#S###E#",
        "#.###.#",
        "#.....#",
        "#######",
    ]
)


def _search(text: str, heading: Heading = Heading.EAST, config: SearchConfig | None = None):
    parsed = parse_maze(text)
    engine = SearchEngine(config)
    return engine.search(parsed.maze, State(parsed.start, heading), parsed.goal)


def test_search_finds_single_turn_cost_in_open_room():
    result = _search(OPEN_ROOM)
    assert result.minimal_cost == 3 + 1000 + 3
    assert result.goal == (1, 4)
    assert result.expansions > 0


def test_every_edge_drops_by_exactly_one_move():
    for text in (OPEN_ROOM, TWIN_CORRIDORS):
        result = _search(text)
        assert result.predecessors.edge_count > 0
        for target, source in result.predecessors.edges():
            delta = target.cost - source.cost
            assert delta in (ADVANCE_COST, ROTATE_COST)
            if delta == ADVANCE_COST:
                dr, dc = source.heading.delta
                assert target.heading is source.heading
                assert target.position == (source.position[0] + dr, source.position[1] + dc)
            else:
                assert target.position == source.position
                assert target.heading in (source.heading.turn_left(), source.heading.turn_right())


def test_same_state_at_different_costs_stays_distinct():
    result = _search(OPEN_ROOM)
    by_state: dict[State, set[int]] = {}
    for target, _ in result.predecessors.edges():
        by_state.setdefault(target.state, set()).add(target.cost)
    assert any(len(costs) > 1 for costs in by_state.values())
    for state, costs in by_state.items():
        for cost in costs:
            key = state.stamp(cost)
            assert key in result.predecessors
            for source in result.predecessors.predecessors(key):
                assert source.cost in (cost - ADVANCE_COST, cost - ROTATE_COST)


def test_tied_arrivals_come_from_both_corridors():
    result = _search(TWIN_CORRIDORS)
    assert result.minimal_cost == 3008
    arrivals = [
        key
        for key in (
            CostStampedState(result.minimal_cost, result.goal, heading) for heading in Heading
        )
        if key in result.predecessors
    ]
    sources = set()
    for key in arrivals:
        sources |= result.predecessors.predecessors(key)
    # One arrival from above, one from below.
    assert {s.position for s in sources} == {(2, 5), (4, 5)}


def test_relation_records_each_edge_once():
    relation = PredecessorRelation()
    target = CostStampedState(1001, (1, 2), Heading.NORTH)
    first = CostStampedState(1000, (2, 2), Heading.NORTH)
    second = CostStampedState(1, (1, 2), Heading.EAST)
    assert relation.record(target, first)
    assert not relation.record(target, first)
    assert relation.record(target, second)
    assert relation.predecessors(target) == frozenset({first, second})
    assert relation.edge_count == 2
    assert len(relation) == 1
    assert CostStampedState(1002, (1, 2), Heading.NORTH) not in relation
    assert relation.predecessors(CostStampedState(1002, (1, 2), Heading.NORTH)) == frozenset()


def test_unreachable_goal_raises():
    with pytest.raises(UnreachableGoalError):
        _search("#####\n#S#E#\n#####")


def test_expansion_cap_raises():
    with pytest.raises(SearchLimitExceededError):
        _search(TWIN_CORRIDORS, config=SearchConfig(max_expansions=3))


def test_generous_expansion_cap_is_harmless():
    result = _search(TWIN_CORRIDORS, config=SearchConfig(max_expansions=10_000))
    assert result.minimal_cost == 3008


def test_tied_edges_merge_under_one_key():
    text = "\n".join(
        [
            "########",
            "#.....##",
            "#.###.##",
            "#S###.E#",
            "#.###.##",
            "#.....##",
            "########",
        ]
    )
    result = _search(text)
    assert result.minimal_cost == 4009
    junction = CostStampedState(4008, (3, 5), Heading.EAST)
    assert result.predecessors.predecessors(junction) == frozenset(
        {
            CostStampedState(3008, (3, 5), Heading.SOUTH),
            CostStampedState(3008, (3, 5), Heading.NORTH),
        }
    )


def test_open_edge_never_leaves_the_grid():
    result = _search(".S.\n#E#\n...", heading=Heading.NORTH)
    assert result.minimal_cost == 2001
    for target, source in result.predecessors.edges():
        for stamp in (target, source):
            r, c = stamp.position
            assert 0 <= r < 3 and 0 <= c < 3
