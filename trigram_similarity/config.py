import logging

from hydra import compose, initialize
from omegaconf import DictConfig, OmegaConf

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    ConfigManager loads the package's Hydra config and hands out values from it.
    Usage:
        config = ConfigManager()
        cfg = config.load(verbose=True)
        threshold = config.select("scanner.threshold", default=0.3)
        # ... later, with a stricter scan threshold ...
        cfg = config.reload(overrides=["scanner.threshold=0.5"])
    """
    def __init__(self, config_name="config", config_path="./configs", overrides=None, version_base="1.3"):
        self.config_name = config_name
        self.config_path = config_path
        self.overrides = list(overrides or [])
        self.version_base = version_base
        self._cfg: DictConfig | None = None

    def load(self, overrides=None, verbose=False) -> DictConfig:
        """Compose `config_name` from `config_path`, applying Hydra-style overrides."""
        overrides = self.overrides if overrides is None else list(overrides)
        with initialize(version_base=self.version_base, config_path=self.config_path):
            self._cfg = compose(config_name=self.config_name, overrides=overrides)
        logger.debug(f"Loaded config '{self.config_name}' with overrides {overrides}")
        if verbose:
            print(OmegaConf.to_yaml(self._cfg))
        return self._cfg

    def reload(self, overrides=None, verbose=False) -> DictConfig:
        """Reload configuration, e.g. after the YAML changed or with new overrides"""
        return self.load(overrides=overrides, verbose=verbose)

    def select(self, key: str, default=None):
        """Dotted-path lookup, `default` when the key is missing."""
        return OmegaConf.select(self.cfg, key, default=default)

    @property
    def cfg(self) -> DictConfig:
        """Get the current config object (load if not loaded)"""
        if self._cfg is None:
            return self.load()
        return self._cfg
