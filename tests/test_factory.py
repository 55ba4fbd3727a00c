import pytest

from urlresolver import (Config, ConstructionError, IndexedFileUrlResolver, ResolutionError, ResolverContext,
                         UrlResolver, create_url_resolver, register_url_resolver)
from urlresolver.resources import DictResourceReader
from urlresolver.url_resolver import get_url_resolver_names


class StaticUrlResolver(UrlResolver):
    """Resolver returning the configured base url for every request."""

    def config_file_path(self, context) -> str:
        return "configurations/static.json"

    def get_url(self, params):
        if params is None:
            raise ResolutionError("params map cannot be None")
        return self.configuration["base_url"]

    def get_url_array(self, params):
        return [self.get_url(params) for _ in params.get("url_index", [])]


def test_factory_builds_configured_strategy(context):
    resolver = create_url_resolver(context)

    assert isinstance(resolver, IndexedFileUrlResolver)
    assert isinstance(resolver, UrlResolver)
    assert resolver.get_url({"url_index": "0"}) == "a"


def test_factory_builds_named_strategy(context):
    assert isinstance(create_url_resolver(context, "indexed_file"), IndexedFileUrlResolver)


def test_registered_names():
    names = get_url_resolver_names()
    assert "IndexedFileUrlResolver" in names
    assert "indexed_file" in names


def test_unknown_strategy(context):
    with pytest.raises(ConstructionError) as exc_info:
        create_url_resolver(context, "no_such_resolver")

    assert "no_such_resolver" in str(exc_info.value)


def test_strategy_from_configuration_overrides():
    config = Config(overrides={
        "url_resolver": {
            "type": "static",
            "strategies": {"static": {"config_file": "configurations/static.json"}}
        }
    })
    reader = DictResourceReader({"configurations/static.json": '{"base_url": "https://example.com/"}'})
    register_url_resolver("static", StaticUrlResolver)

    resolver = create_url_resolver(ResolverContext(config, reader=reader))

    assert isinstance(resolver, StaticUrlResolver)
    assert resolver.get_url({}) == "https://example.com/"
    assert resolver.get_url_array({"url_index": ["0", "1"]}) == ["https://example.com/"] * 2


def test_missing_strategy_configuration_entry():
    config = Config(overrides={"url_resolver": {"strategies": {"IndexedFileUrlResolver": {"config_file": ""}}}})

    with pytest.raises(ConstructionError) as exc_info:
        create_url_resolver(ResolverContext(config, reader=DictResourceReader()))

    assert isinstance(exc_info.value.__cause__, KeyError)


def test_missing_configuration_resource(tmp_path):
    config = Config(overrides={"asset_root": str(tmp_path)})

    with pytest.raises(ConstructionError) as exc_info:
        create_url_resolver(ResolverContext(config))

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_constructor_failure_is_wrapped():
    def broken(context):
        raise TypeError("boom")

    register_url_resolver("broken", broken)

    with pytest.raises(ConstructionError) as exc_info:
        create_url_resolver(ResolverContext(Config(), reader=DictResourceReader()), "broken")

    assert isinstance(exc_info.value.__cause__, TypeError)


def test_none_context():
    with pytest.raises(ConstructionError):
        create_url_resolver(None)


def test_register_rejects_non_callable():
    with pytest.raises(ValueError):
        register_url_resolver("bad", "not a constructor")


def test_malformed_context_is_wrapped():
    class IncompleteContext:
        config = Config()

    with pytest.raises(ConstructionError) as exc_info:
        create_url_resolver(IncompleteContext())

    assert isinstance(exc_info.value.__cause__, AttributeError)
