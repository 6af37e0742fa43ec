"""
Runs every factory demonstration and collects the display lines.
"""
from typing import List, Optional
from config.config_manager import Config, ConfigManager
from config.presets import ConfigPresets
from validation.schema import PlaygroundSchema
from factories.registry import parse_discriminant
from factories.widgets import Style, create_widgets
from factories.numerics import NumberType, make_number
from factories.fruit import FruitKind, select_fruit
from factories.currency import Country, currency_for
from factories.banks import BankType, select_bank
from utils.error_handlers import ErrorContext
from utils.exceptions import ConfigurationError
from utils.logging_config import LoggerFactory, get_logger

logger = get_logger(__name__)

NO_PRODUCT = "<none>"


def load_playground_config(filepath: Optional[str] = None, use_env: bool = True) -> Config:
    """
    Build the playground configuration.

    Defaults come from ``ConfigPresets.default()``, then the optional file,
    then ``FACTORY_*`` environment variables.
    """
    manager = ConfigManager(schema=PlaygroundSchema())
    manager.load_from_dict(ConfigPresets.default())
    if filepath:
        manager.load_from_file(filepath)
    if use_env:
        manager.load_from_env()
    return manager.validate()


def configure_logging(config: Config):
    logging_config = config.get('logging', {})
    LoggerFactory.configure(
        log_dir=logging_config.get('log_dir', 'logs'),
        log_level=logging_config.get('log_level', 'WARNING'),
        enable_file=logging_config.get('enable_file', False),
        enable_structured=logging_config.get('enable_structured', False),
        force=True
    )


class PlaygroundRunner:
    """Walks through the abstract factory, factory method and simple factory examples."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or load_playground_config(use_env=False)
        self.logger = get_logger(self.__class__.__name__)

    def _setting(self, key: str):
        return self.config.get(f'playground.{key}')

    def widget_lines(self) -> List[str]:
        style = parse_discriminant(Style, self._setting('style'))
        widgets = create_widgets(style)
        if widgets is None:
            return [NO_PRODUCT]
        button, border = widgets
        return [button.name(), border.border_width()]

    def number_lines(self) -> List[str]:
        # NEXT_STEP takes the first payload, NATIVE the second
        lines = []
        payloads = self._setting('numbers') or []
        if len(payloads) > len(NumberType):
            raise ConfigurationError(
                f"Expected at most {len(NumberType)} numbers, got {len(payloads)}",
                details={'numbers': list(payloads)}
            )
        for number_type, text in zip(NumberType, payloads):
            number = make_number(number_type, text)
            lines.append(number.string_value() if number is not None else NO_PRODUCT)
        return lines

    def fruit_lines(self) -> List[str]:
        kind = parse_discriminant(FruitKind, self._setting('fruit'))
        fruit = select_fruit(kind)
        return [repr(fruit) if fruit is not None else NO_PRODUCT]

    def currency_lines(self) -> List[str]:
        country = parse_discriminant(Country, self._setting('country'))
        currency = currency_for(country)
        if currency is None:
            self.logger.info(f"No currency available for {country.name}")
            return [NO_PRODUCT]
        return [currency.symbol()]

    def bank_lines(self) -> List[str]:
        bank_type = parse_discriminant(BankType, self._setting('bank'))
        return [select_bank(bank_type).display_name()]

    def run(self) -> List[str]:
        """Run every section in order and return all display lines."""
        sections = [
            ('abstract factory', self.widget_lines),
            ('string factory', self.number_lines),
            ('factory method', self.fruit_lines),
            ('optional factory', self.currency_lines),
            ('simple factory', self.bank_lines),
        ]

        lines: List[str] = []
        for title, section in sections:
            with ErrorContext(title):
                lines.extend(section())
        return lines


def run_playground(filepath: Optional[str] = None) -> List[str]:
    """Load configuration, set up logging and run the playground."""
    config = load_playground_config(filepath)
    configure_logging(config)
    return PlaygroundRunner(config).run()
