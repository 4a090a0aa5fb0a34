"""
Carousel engine shared by every scrolling row of cards.

The engine is plain state: it never sleeps or schedules anything itself.
Time enters through ``now`` arguments (seconds on a monotonic clock, taken
from ``clock`` when omitted), so the same object can be driven by an event
loop (``CarouselAutoPlayer``) or stepped by hand.

Index rules:

* short rows are repeated until the display list holds at least two screens
  of cards, except rows with fewer than ``min_loop_items`` items, which are
  shown as they are with no navigation at all;
* navigation stops are capped at ``max_nav_stops``; the last reachable index
  is ``nav_count - 1`` even when more scroll offsets exist.
"""

import sys
import time
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from storefront.ui.timers import Ticker

T = TypeVar("T")


@dataclass(frozen=True)
class CarouselConfig:
    visible_count: int = 4
    item_width: float = 296.0  # card width + gap, in px
    interval: float = 4.0  # auto-advance period, seconds
    cooldown: float = 6.0  # auto-advance pause after manual navigation
    swipe_threshold: float = 30.0  # px
    max_nav_stops: int = 9
    min_loop_items: int = 4


# Storefront rows
OFFERS_CAROUSEL = CarouselConfig(visible_count=4, item_width=296.0, interval=4.0, cooldown=8.0)
PAINTS_CAROUSEL = CarouselConfig(visible_count=5, item_width=280.0, interval=3.5, cooldown=6.0)
ELECTRICAL_CAROUSEL = CarouselConfig(visible_count=5, item_width=280.0, interval=3.5, cooldown=6.0)
# every banner gets its own dot
BANNER_CAROUSEL = CarouselConfig(
    visible_count=1, item_width=100.0, interval=5.0, cooldown=10.0, min_loop_items=2, max_nav_stops=sys.maxsize,
)


def build_display_list(items: Sequence[T], visible_count: int, min_loop_items: int = 4) -> List[T]:
    """
    Items as shown on the track.

    Empty stays empty; fewer than ``min_loop_items`` items are returned as
    they are; otherwise the items are repeated until there are at least
    ``visible_count * 2`` of them.
    """
    items = list(items)
    if not items or len(items) < min_loop_items:
        return items

    display = list(items)
    while len(display) < visible_count * 2:
        display.extend(items)
    return display


class CarouselEngine(Generic[T]):
    """Index, auto-advance and gesture state of one carousel instance"""

    def __init__(
        self,
        items: Sequence[T] = (),
        config: CarouselConfig = OFFERS_CAROUSEL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.clock = clock
        self.current_index = 0
        self.is_auto_playing = True
        self._hovered = False
        self._touching = False
        self._resume_at: Optional[float] = None
        self._next_advance_at = clock() + config.interval
        self._touch_start_x: Optional[float] = None
        self._touch_end_x: Optional[float] = None
        self.set_items(items)

    # ------------------------------------------------------------------
    # Items and bounds
    # ------------------------------------------------------------------

    def set_items(self, items: Sequence[T]) -> None:
        """Replace the source items and keep the index in range."""
        self.items: List[T] = list(items)
        self.display_items: List[T] = build_display_list(
            self.items, self.config.visible_count, self.config.min_loop_items
        )
        self.current_index = min(self.current_index, self.last_index)

    @property
    def is_empty(self) -> bool:
        return not self.display_items

    @property
    def max_index(self) -> int:
        return max(0, len(self.display_items) - self.config.visible_count)

    @property
    def controls_active(self) -> bool:
        """Navigation and auto-advance only run when there is something to scroll."""
        return (
            len(self.items) >= self.config.min_loop_items
            and len(self.display_items) > self.config.visible_count
        )

    @property
    def nav_count(self) -> int:
        """Number of navigation dots"""
        if not self.controls_active:
            return 0
        return min(self.max_index + 1, self.config.max_nav_stops)

    @property
    def last_index(self) -> int:
        return max(0, self.nav_count - 1)

    @property
    def is_paused(self) -> bool:
        return self._hovered or self._touching

    @property
    def offset(self) -> float:
        return self.current_index * self.config.item_width

    @property
    def transform(self) -> str:
        return f"translateX(-{self.offset:g}px)"

    def visible_items(self) -> List[T]:
        start = self.current_index
        return self.display_items[start:start + self.config.visible_count]

    # ------------------------------------------------------------------
    # Manual navigation
    # ------------------------------------------------------------------

    def _now(self, now: Optional[float]) -> float:
        return self.clock() if now is None else now

    def _manual(self, now: Optional[float]) -> None:
        # every manual action restarts the cooldown
        self.is_auto_playing = False
        self._resume_at = self._now(now) + self.config.cooldown

    def next(self, now: Optional[float] = None) -> int:
        if not self.controls_active:
            return self.current_index
        self.current_index = 0 if self.current_index >= self.last_index else self.current_index + 1
        self._manual(now)
        return self.current_index

    def prev(self, now: Optional[float] = None) -> int:
        if not self.controls_active:
            return self.current_index
        self.current_index = self.last_index if self.current_index <= 0 else self.current_index - 1
        self._manual(now)
        return self.current_index

    def go_to(self, index: int, now: Optional[float] = None) -> int:
        if not self.controls_active:
            return self.current_index
        self.current_index = max(0, min(index, self.last_index))
        self._manual(now)
        return self.current_index

    # ------------------------------------------------------------------
    # Hover and touch
    # ------------------------------------------------------------------

    def set_hover(self, hovered: bool, now: Optional[float] = None) -> None:
        was_paused = self.is_paused
        self._hovered = hovered
        if was_paused and not self.is_paused:
            self._next_advance_at = self._now(now) + self.config.interval

    def touch_start(self, x: float, now: Optional[float] = None) -> None:
        self._touching = True
        self._touch_start_x = x
        self._touch_end_x = None

    def touch_move(self, x: float) -> None:
        if self._touching:
            self._touch_end_x = x

    def touch_end(self, now: Optional[float] = None) -> Optional[str]:
        """
        Finish a touch gesture.

        Returns "next" or "prev" when the gesture was a swipe past the
        threshold, None otherwise.
        """
        start, end = self._touch_start_x, self._touch_end_x
        self._touch_start_x = self._touch_end_x = None
        was_paused = self.is_paused
        self._touching = False
        if was_paused and not self.is_paused:
            self._next_advance_at = self._now(now) + self.config.interval

        if start is None or end is None:
            return None

        distance = start - end
        if distance > self.config.swipe_threshold:
            self.next(now)
            return "next"
        if distance < -self.config.swipe_threshold:
            self.prev(now)
            return "prev"
        return None

    # ------------------------------------------------------------------
    # Auto-advance
    # ------------------------------------------------------------------

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Advance when the auto-play period has elapsed.

        Returns True when the index moved.
        """
        if not self.controls_active:
            return False
        now = self._now(now)

        if self._resume_at is not None and now >= self._resume_at:
            self.is_auto_playing = True
            self._resume_at = None
            self._next_advance_at = now + self.config.interval

        if not self.is_auto_playing or self.is_paused:
            return False

        if now < self._next_advance_at:
            return False

        self.current_index = 0 if self.current_index >= self.last_index else self.current_index + 1
        self._next_advance_at = now + self.config.interval
        return True


class CarouselAutoPlayer:
    """Drives ``CarouselEngine.tick`` from the event loop"""

    def __init__(self, engine: CarouselEngine, resolution: float = 0.25,
                 on_change: Optional[Callable[[int], object]] = None):
        self.engine = engine
        self.on_change = on_change
        self._ticker = Ticker(resolution, self._tick, name="carousel-autoplay")

    @property
    def running(self) -> bool:
        return self._ticker.running

    def _tick(self) -> None:
        if self.engine.tick() and self.on_change is not None:
            self.on_change(self.engine.current_index)

    def start(self) -> None:
        if self.engine.controls_active:
            self._ticker.start()

    async def stop(self) -> None:
        await self._ticker.stop()
