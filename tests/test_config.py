import pytest

from bandit_search import (
    ExponentialWeightsSearch,
    LILUCBSearch,
    LUCBSearch,
    SearchConfig,
    SimpleBanditSearch,
    STRATEGY_REGISTRY,
    create_search_strategy,
)


def test_defaults_are_valid():
    config = SearchConfig()
    assert config.validate() is config
    assert (config.alpha, config.delta, config.k1) == (0.3, 0.1, 1.25)


@pytest.mark.parametrize(
    "overrides",
    [
        {"strategy": "thompson"},
        {"alpha": 0.0},
        {"alpha": 1.5},
        {"delta": 1.0},
        {"delta": 0.0},
        {"k1": 0.0},
    ],
)
def test_invalid_config(overrides):
    with pytest.raises(ValueError):
        SearchConfig(**overrides).validate()


@pytest.mark.parametrize("name", sorted(STRATEGY_REGISTRY))
def test_registry_creates_each_variant(name):
    strategy = create_search_strategy(name)
    assert isinstance(strategy, STRATEGY_REGISTRY[name])


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Available"):
        create_search_strategy("ucb1")


def test_config_parameters_reach_strategies():
    config = SearchConfig(alpha=0.5, delta=0.05, k1=2.0, random_seed=7)

    simple = create_search_strategy("simple_bandit", config)
    exp3 = create_search_strategy("exp3", config)
    lil = create_search_strategy("lil_ucb", config)
    lucb = create_search_strategy("lucb", config)

    assert isinstance(simple, SimpleBanditSearch) and simple.alpha == 0.5
    assert isinstance(exp3, ExponentialWeightsSearch) and exp3.seed == 7
    assert isinstance(lil, LILUCBSearch) and lil.delta == 0.05
    assert isinstance(lucb, LUCBSearch) and (lucb.delta, lucb.k1) == (0.05, 2.0)


def test_kwargs_override_config():
    config = SearchConfig(alpha=0.5)
    assert create_search_strategy("simple_bandit", config, alpha=0.2).alpha == 0.2


def test_fields_are_documented():
    doc = SearchConfig.__doc__
    for name in ("strategy", "alpha", "delta", "k1", "random_seed"):
        assert f"{name}:" in doc
    assert SearchConfig.validate.__doc__
