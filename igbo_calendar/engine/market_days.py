"""market_days — 4-дневный цикл рыночных дней (Eke → Orie → Afo → Nkwo).

Цикл не прерывается на границах месяцев и года: каждому календарному дню
соответствует ровно один шаг цикла.

Начальная позиция задаётся одним из способов:
- по имени рыночного дня (anchor), с учётом вариантов написания;
- по контрольной точке MarketCheckpoint (известная пара дата/рыночный день).

Неизвестное имя не является ошибкой: используется позиция 0 (первая метка цикла).
"""

import logging
import unicodedata
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional, Tuple

from igbo_calendar.core.domain.registry import DEFAULT_REGISTRY, CalendarRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketCheckpoint:
    """Известная пара (дата, рыночный день).

    По умолчанию: 2026-01-07 = Nkwo.
    """

    day: date = field(default_factory=lambda: date(2026, 1, 7))
    market_day: str = "Nkwo"


DEFAULT_CHECKPOINT = MarketCheckpoint()


def _normalize_name(name: str) -> str:
    return unicodedata.normalize("NFC", name.strip()).casefold()


def resolve_market_index(name: str, registry: CalendarRegistry = DEFAULT_REGISTRY) -> int:
    """Позиция рыночного дня в цикле по имени.

    Порядок поиска:
    1. Точное совпадение с меткой цикла
    2. Совпадение без учёта регистра и пробелов по краям
    3. Вариант написания из registry.market_aliases (Ọrie, Afọ, Nkwọ, ...)

    Args:
        name: Имя рыночного дня
        registry: Реестр меток

    Returns:
        Индекс 0..3; 0 если имя не распознано
    """
    cycle = registry.market_cycle
    if name in cycle:
        return cycle.index(name)

    wanted = _normalize_name(name)
    for index, label in enumerate(cycle):
        if _normalize_name(label) == wanted:
            return index

    for alias, target in registry.market_aliases.items():
        if _normalize_name(alias) == wanted:
            return cycle.index(target)

    logger.warning(
        "unknown market day %r, falling back to %r (index 0)", name, cycle[0]
    )
    return 0


def market_day_index_for_date(
    day: date,
    checkpoint: MarketCheckpoint = DEFAULT_CHECKPOINT,
    registry: CalendarRegistry = DEFAULT_REGISTRY,
) -> int:
    """Позиция в цикле для произвольной григорианской даты.

    index = (index(checkpoint) + (day - checkpoint.day)) mod 4
    """
    anchor_index = resolve_market_index(checkpoint.market_day, registry)
    delta_days = (day - checkpoint.day).days
    return (anchor_index + delta_days) % len(registry.market_cycle)


def market_day_for_date(
    day: date,
    checkpoint: MarketCheckpoint = DEFAULT_CHECKPOINT,
    registry: CalendarRegistry = DEFAULT_REGISTRY,
) -> str:
    """Рыночный день для григорианской даты относительно контрольной точки."""
    return registry.market_cycle[market_day_index_for_date(day, checkpoint, registry)]


class MarketDayCycler:
    """Вращающаяся последовательность из 4 рыночных дней.

    Два способа использования:
    - stateful: next() возвращает текущую метку и сдвигает позицию на 1;
    - pure: step(position) возвращает (метка, следующая позиция) без изменения
      состояния — для передачи позиции через fold (см. YearBuilder).
    """

    def __init__(
        self,
        anchor_market_day: Optional[str] = None,
        registry: CalendarRegistry = DEFAULT_REGISTRY,
    ):
        """
        Args:
            anchor_market_day: Рыночный день первой выдачи
                (None или неизвестное имя → первая метка цикла)
            registry: Реестр меток (market_cycle, market_aliases)
        """
        self._labels: Tuple[str, ...] = registry.market_cycle
        if anchor_market_day is None:
            self._position = 0
        else:
            self._position = resolve_market_index(anchor_market_day, registry)

    @classmethod
    def from_checkpoint(
        cls,
        day: date,
        checkpoint: MarketCheckpoint = DEFAULT_CHECKPOINT,
        registry: CalendarRegistry = DEFAULT_REGISTRY,
    ) -> "MarketDayCycler":
        """Цикл, первая выдача которого соответствует дате day."""
        return cls(market_day_for_date(day, checkpoint, registry), registry)

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    @property
    def position(self) -> int:
        """Текущая позиция 0..3"""
        return self._position

    @property
    def current(self) -> str:
        """Метка, которую вернёт следующий вызов next()"""
        return self._labels[self._position]

    def label_at(self, position: int) -> str:
        """Метка для позиции (по модулю длины цикла)"""
        return self._labels[position % len(self._labels)]

    def step(self, position: int) -> Tuple[str, int]:
        """Метка позиции и следующая позиция; состояние не меняется."""
        return self.label_at(position), (position + 1) % len(self._labels)

    def next(self) -> str:
        """Текущая метка; затем позиция сдвигается на 1 (mod 4)."""
        label, self._position = self.step(self._position)
        return label

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()
