import pandas as pd
import pytest

from bandit_search import (
    ArmInfo,
    ArmKey,
    ArmsAllocator,
    EpisodeLog,
    EpisodeResult,
    ScriptedArm,
    StaticSearch,
    create_search_strategy,
    run_episode,
)
from bandit_search.telemetry import FRAME_COLUMNS


@pytest.fixture
def universe():
    return {
        ArmKey("ridge", f"reg-{i}"): ScriptedArm(f"reg-{i}", lambda k, i=i: 0.1 * i + 0.01 * k)
        for i in range(5)
    }


def test_arm_info_budget():
    assert ArmInfo("msd", num_arms=4, max_iter=10, trial=0).total_budget == 40


def test_run_episode_records_result(universe):
    allocator = ArmsAllocator(universe)
    strategy = StaticSearch()
    info = ArmInfo("synthetic", num_arms=3, max_iter=5, trial=0)

    best = run_episode(strategy, allocator, info)

    assert best == ArmKey("ridge", "reg-2")
    assert info in strategy.results
    result = strategy.results[info]
    assert isinstance(result, EpisodeResult)
    assert result.best == best
    assert result.strategy == strategy.name
    assert result.total_pulls == 15
    assert [r.key for r in result.arms] == list(universe)[:3]


def test_records_survive_arm_reuse(universe):
    allocator = ArmsAllocator(universe)
    strategy = StaticSearch()
    first = ArmInfo("synthetic", 3, 4, 0)
    second = ArmInfo("synthetic", 3, 2, 1)

    run_episode(strategy, allocator, first)
    run_episode(strategy, allocator, second)

    # Same arm objects were reset and reused; the first record is untouched
    assert strategy.results[first].total_pulls == 12
    assert strategy.results[second].total_pulls == 6
    record = strategy.results[first].arms[0]
    assert record.num_pulls == 4
    assert record.validation == pytest.approx((0.01, 0.02, 0.03, 0.04))


def test_explicit_budget_overrides_arm_info(universe):
    strategy = StaticSearch()
    info = ArmInfo("synthetic", 2, 5, 0)
    run_episode(strategy, ArmsAllocator(universe), info, total_budget=4)
    assert strategy.results[info].total_pulls == 4


def test_log_is_append_only(universe):
    strategy = StaticSearch()
    allocator = ArmsAllocator(universe)
    info = ArmInfo("synthetic", 2, 3, 0)
    run_episode(strategy, allocator, info)

    with pytest.raises(ValueError, match="already recorded"):
        run_episode(strategy, allocator, info)
    assert len(strategy.results) == 1


def test_caller_owned_log_is_shared(universe):
    log = EpisodeLog()
    allocator = ArmsAllocator(universe)
    static = create_search_strategy("static", episode_log=log)
    lil = create_search_strategy("lil_ucb", episode_log=log)

    run_episode(static, allocator, ArmInfo("synthetic", 3, 4, 0))
    run_episode(lil, allocator, ArmInfo("synthetic", 3, 4, 1))

    assert static.results is log
    assert lil.results is log
    assert len(log) == 2
    assert [result.strategy for result in log.values()] == [static.name, lil.name]


def test_private_logs_are_independent():
    assert StaticSearch().results is not StaticSearch().results


def test_to_frame(universe):
    strategy = StaticSearch()
    allocator = ArmsAllocator(universe)
    run_episode(strategy, allocator, ArmInfo("synthetic", 2, 3, 0))
    run_episode(strategy, allocator, ArmInfo("synthetic", 3, 2, 1))

    frame = strategy.results.to_frame()

    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == FRAME_COLUMNS
    assert len(frame) == 6 + 6
    assert frame.groupby("trial")["pull"].max().to_dict() == {0: 3, 1: 2}
    best_rows = frame[frame["is_best"]]
    assert set(best_rows["instance_id"]) == {"reg-1", "reg-2"}


def test_empty_log_frame():
    frame = EpisodeLog().to_frame()
    assert frame.empty
    assert list(frame.columns) == FRAME_COLUMNS
