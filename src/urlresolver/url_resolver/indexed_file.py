"""
Indexed file URL resolver.

Reads URLs from a catalog document of the form ``{"urls": ["url1", "url2"]}``
and returns the URL(s) at the requested indexes. Request parameters:

- ``url_file``: logical path of the catalog; defaults to the ``url_file``
  entry of the strategy configuration
- ``url_index``: index as a string for ``get_url``, list of index strings
  for ``get_url_array``

The catalog is read again on every call.
"""
import re
from typing import Dict, Any, List, Optional

from pydantic import ValidationError

from .base import UrlResolver
from ..document_parser import UrlCatalog
from ..errors import ResolutionError
from ..strategy_config import StrategyConfig

URL_INDEX = "url_index"
URL_FILE = "url_file"

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


class IndexedFileUrlResolver(UrlResolver):
    """Resolver returning URLs by position from a catalog file."""

    strategy_name = "IndexedFileUrlResolver"

    def config_file_path(self, context) -> str:
        return StrategyConfig(context.config).config_file_path(self.strategy_name)

    def get_url(self, params: Optional[Dict[str, Any]]) -> str:
        """
        Get the URL at ``params["url_index"]`` in the catalog.

        Args:
            params: Request with ``url_index`` and optionally ``url_file``

        Returns:
            URL at the index
        """
        self._check_params(params)
        index = params.get(URL_INDEX)
        url_file = self._catalog_path(params)

        catalog = self._load_catalog(url_file, index)
        url = self._lookup(catalog, index, url_file, index)

        self.logger.debug(f"Resolved url at index {index} in file {url_file}")
        return url

    def get_url_array(self, params: Optional[Dict[str, Any]]) -> List[str]:
        """
        Get the URLs at each index of ``params["url_index"]``, in order.

        Duplicate indexes are resolved independently. If any index fails the
        whole call fails; no partial list is returned.

        Args:
            params: Request with ``url_index`` as a list of index strings and
                optionally ``url_file``

        Returns:
            URLs, one per index
        """
        self._check_params(params)
        indexes = params.get(URL_INDEX)
        url_file = self._catalog_path(params)

        if not isinstance(indexes, (list, tuple)):
            raise self._error(f"{URL_INDEX} must be a list of indexes", indexes, url_file)

        catalog = self._load_catalog(url_file, indexes)

        urls = []
        for index in indexes:
            urls.append(self._lookup(catalog, index, url_file, indexes))

        self.logger.debug(f"Resolved {len(urls)} urls at indexes {indexes} in file {url_file}")
        return urls

    def _catalog_path(self, params: Dict[str, Any]) -> Any:
        """Get the catalog path from params, else from the strategy configuration."""
        if params.get(URL_FILE) is not None:
            return params[URL_FILE]
        return StrategyConfig.default_catalog_path(self.configuration)

    def _check_params(self, params: Optional[Dict[str, Any]]) -> None:
        if params is None:
            raise self._error("params map cannot be None", None, None)

    def _load_catalog(self, url_file: Optional[str], index: Any) -> UrlCatalog:
        """
        Read and parse the catalog.

        Args:
            url_file: Logical path of the catalog
            index: Requested index(es), reported on failure

        Returns:
            Parsed catalog
        """
        if not url_file:
            raise self._error(f"no {URL_FILE} in params or configuration", index, url_file)
        if not isinstance(url_file, str):
            raise self._error(f"{URL_FILE} must be a string, got {type(url_file).__name__}", index, url_file)

        try:
            content = self.context.reader.read(url_file)
        except (OSError, ValueError) as e:
            raise self._error("catalog cannot be read", index, url_file, e) from e

        try:
            data = self.context.parser.parse(content, source=url_file)
        except ValueError as e:
            raise self._error("catalog is malformed", index, url_file, e) from e

        try:
            return UrlCatalog.from_mapping(data)
        except ValidationError as e:
            raise self._error("catalog has no valid urls list", index, url_file, e) from e

    def _lookup(self, catalog: UrlCatalog, index: Any, url_file: str, requested: Any) -> str:
        """Parse one index and return the catalog entry at it."""
        if isinstance(index, bool) or not isinstance(index, (str, int)):
            raise self._error(f"index {index!r} is not an integer string", requested, url_file)

        if isinstance(index, str):
            if not _INDEX_PATTERN.fullmatch(index):
                raise self._error(f"index {index!r} is not a base-10 integer", requested, url_file)
            try:
                position = int(index, 10)
            except ValueError as e:
                raise self._error(f"index {index!r} is not a base-10 integer", requested, url_file, e) from e
        else:
            position = index

        try:
            return catalog.get(position)
        except IndexError as e:
            raise self._error(f"index {position} is out of range", requested, url_file, e) from e

    def _error(self, reason: str, index: Any, url_file: Optional[str],
               cause: Optional[BaseException] = None) -> ResolutionError:
        message = f"Could not read url at index {index} in file {url_file}: {reason}"
        if cause is not None:
            self.logger.error(message, exc_info=cause)
        else:
            self.logger.error(message)
        return ResolutionError(message, cause, index=index, url_file=url_file)
