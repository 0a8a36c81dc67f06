"""Configuration loader for poker hand variants."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parents[1] / "data" / "variants"


class VariantConfigError(LookupError):
    """Raised when a known variant has no usable configuration."""

    pass


@dataclass(frozen=True)
class ShowdownRule:
    """
    How a five-card hand is formed at showdown.

    Either ``any_cards`` is set (any mix of hole and community cards) or the
    hand takes exactly ``hole_cards`` hole cards and ``community_cards``
    community cards.
    """

    any_cards: int | None = None
    hole_cards: int = 0
    community_cards: int = 0

    @property
    def hand_size(self) -> int:
        if self.any_cards is not None:
            return self.any_cards
        return self.hole_cards + self.community_cards


@dataclass(frozen=True)
class VariantConfig:
    """Configuration for a poker variant."""

    id: str
    name: str
    description: str
    hole_cards: int
    board_min: int
    board_max: int
    showdown: ShowdownRule


class VariantConfigLoader:
    """Loads and manages variant configurations."""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self.config_dir = config_dir
        self._configs: dict[str, VariantConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all variant configuration files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading variant configurations from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Configuration directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))

        if not json_files:
            logger.warning(f"No JSON configuration files found in {self.config_dir}")

        for json_file in json_files:
            try:
                config = self._load_config_file(json_file)
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.error(f"Failed to load configuration from {json_file}: {e}")
                continue
            self._configs[config.id] = config
            logger.debug(f"Loaded configuration for {config.id}")

        logger.info(f"Loaded {len(self._configs)} variant configurations")
        self._loaded = True

    def _load_config_file(self, filepath: Path) -> VariantConfig:
        """Load a single variant configuration file."""
        with open(filepath) as f:
            data = json.load(f)

        showdown_data = data["showdown"]
        if "anyCards" in showdown_data:
            showdown = ShowdownRule(any_cards=int(showdown_data["anyCards"]))
        else:
            showdown = ShowdownRule(
                hole_cards=int(showdown_data["holeCards"]),
                community_cards=int(showdown_data["communityCards"]),
            )

        board = data.get("board", {})
        config = VariantConfig(
            id=data.get("id", filepath.stem),
            name=data.get("name", ""),
            description=data.get("description", ""),
            hole_cards=int(data["hole_cards"]),
            board_min=int(board.get("min", 3)),
            board_max=int(board.get("max", 5)),
            showdown=showdown,
        )

        if showdown.hand_size != 5:
            raise ValueError(f"{config.id} showdown forms {showdown.hand_size}-card hands, expected 5")
        if showdown.hole_cards > config.hole_cards or showdown.community_cards > config.board_min:
            raise ValueError(f"{config.id} showdown rule needs more cards than the variant deals")

        return config

    def get_config(self, variant: str) -> VariantConfig:
        """
        Get configuration for a specific variant.

        Args:
            variant: The variant id (e.g., 'texas', 'omaha')

        Raises:
            VariantConfigError: If the variant has no loaded configuration
        """
        if not self._loaded:
            self.load_all_configs()

        config = self._configs.get(variant)
        if config is None:
            message = f"No configuration loaded for variant '{variant}' from {self.config_dir}"
            logger.error(message)
            raise VariantConfigError(message)
        return config


# Packaged variants load at import time
variant_config_loader = VariantConfigLoader()
variant_config_loader.load_all_configs()


def get_variant_config(variant: str) -> VariantConfig:
    """Convenience function to get a variant configuration."""
    return variant_config_loader.get_config(variant)
