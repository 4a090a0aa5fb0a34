"""
View logic of the storefront: carousels, countdowns, cards, pages and the
contact popup.
"""

from storefront.ui.carousel import CarouselConfig, CarouselEngine, CarouselAutoPlayer, build_display_list
from storefront.ui.countdown import Countdown, TimeLeft, time_left
from storefront.ui.contact_flow import ContactFlow, ContactFlowState, InvalidTransition
from storefront.ui.cards import ProductCard
from storefront.ui.timers import Ticker

__all__ = [
    "CarouselConfig",
    "CarouselEngine",
    "CarouselAutoPlayer",
    "build_display_list",
    "Countdown",
    "TimeLeft",
    "time_left",
    "ContactFlow",
    "ContactFlowState",
    "InvalidTransition",
    "ProductCard",
    "Ticker",
]
