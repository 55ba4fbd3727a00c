import json
import logging

import pytest

from urlresolver import Config, ResolverContext, create_url_resolver

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

CATALOG = """
// Feed catalog
{
  /* ordered list of feed urls */
  "urls": [
    "a",
    "b",
    "c"
  ]
}
"""

CONFIG_YAML = """
asset_root: assets
url_resolver:
  type: IndexedFileUrlResolver
  strategies:
    IndexedFileUrlResolver:
      config_file: configurations/IndexedFileUrlResolverConfig.json
"""


@pytest.fixture
def asset_root(tmp_path):
    """Create an asset directory with a strategy configuration and two catalogs."""
    root = tmp_path / "assets"
    (root / "configurations").mkdir(parents=True)
    (root / "catalogs").mkdir()

    (root / "configurations" / "IndexedFileUrlResolverConfig.json").write_text(
        '// default catalog\n' + json.dumps({"url_file": "catalogs/default.json"}), encoding='utf-8')
    (root / "catalogs" / "default.json").write_text(CATALOG, encoding='utf-8')
    (root / "catalogs" / "feeds.json").write_text(
        json.dumps({"urls": ["http://example.com/feed0.json", "https://example.com/feed1.json"]}),
        encoding='utf-8')
    return root


@pytest.fixture
def config_path(tmp_path, asset_root):
    """Write a configuration file next to the asset directory."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding='utf-8')
    return path


@pytest.fixture
def context(config_path) -> ResolverContext:
    """Resolver context loaded from the test configuration."""
    return ResolverContext(Config(str(config_path)), logger=logging.getLogger("urlresolver_test"))


@pytest.fixture
def resolver(context):
    """Indexed file resolver built through the factory."""
    return create_url_resolver(context)
