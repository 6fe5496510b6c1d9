from .actions import Choice, PotentialAction
from .card import ConnectorCard, create_card
from .errors import TeamsConfigError, TeamsException
from .section import CardSection
from .text_utils import format_url

__all__ = [
    "CardSection",
    "Choice",
    "ConnectorCard",
    "PotentialAction",
    "TeamsConfigError",
    "TeamsException",
    "create_card",
    "format_url",
]

__version__ = "0.1.0"
