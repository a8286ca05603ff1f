"""DynamicConfigLoader — one cached, initially loaded store per source name."""

import threading

from prop_config.dynamic.application.watcher import PollingConfigWatcher
from prop_config.dynamic.domain.observer import DynamicConfigObserver
from prop_config.dynamic.infrastructure.file_config import FileDynamicConfig
from prop_config.settings.domain.options import StoreOptions
from prop_config.source.domain.locator import SourceLocator


class DynamicConfigLoader:
    """Creates, loads and caches FileDynamicConfig stores by name.

    When a watcher is given every newly created store is registered with it so
    later changes to its source are picked up.
    """

    def __init__(
        self,
        observer: DynamicConfigObserver,
        options: StoreOptions | None = None,
        watcher: PollingConfigWatcher | None = None,
        locator: SourceLocator | None = None,
    ) -> None:
        self._observer = observer
        self._options = options if options is not None else StoreOptions()
        self._watcher = watcher
        self._locator = locator
        self._configs: dict[str, FileDynamicConfig] = {}
        self._lock = threading.Lock()

    def load(self, name: str, fail_on_missing: bool | None = None) -> FileDynamicConfig:
        """
        Return the store for ``name``, creating and loading it on first use.

        ``fail_on_missing`` overrides the loader-wide option for a new store; it
        has no effect when the store is already cached.

        Raises:
            SourceNotFoundError: if the source is required but cannot be located.
            ParseFailureError: if the initial load cannot parse the source.
        """
        with self._lock:
            cached = self._configs.get(name)
            if cached is not None:
                return cached

            options = self._options
            if fail_on_missing is not None:
                options = options.model_copy(
                    update={"fail_on_missing": fail_on_missing}
                )

            config = FileDynamicConfig(
                name=name,
                observer=self._observer,
                options=options,
                locator=self._locator,
            )
            seen = config.last_modified()
            config.reload()
            self._configs[name] = config

        if self._watcher is not None:
            self._watcher.watch(config=config, last_seen=seen)
        return config

    def loaded_names(self) -> list[str]:
        return sorted(self._configs)
