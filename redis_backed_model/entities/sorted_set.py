from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from redis_backed_model.entities.commands import SortedSetAdd
from redis_backed_model.errors import MalformedScoreDirective
from redis_backed_model.utils.naming import pluralize, underscore

KEY_PATTERN = re.compile(r"score_\[(\w+)\|(\w+)\]")
VALUE_PATTERN = re.compile(r".*\[([^\[\]|\s]+)\|([^\[\]|\s]+)\]")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DATE_DIMENSION = "date"


@dataclass(frozen=True)
class SortedSetDirective:
    """
    One ``score_[<dimension>|<by>]`` attribute, read as a sorted set membership.

        {'score_[colour|date]': '[red|2012-03-04]'} on Widget 7
        => zadd|widgets_for_colour_by_date:red|1330819200.0|7
    """

    model_name: str
    model_id: Any
    dimension: str
    by: str
    subkey: str
    score_source: str

    @staticmethod
    def matches(key) -> bool:
        return isinstance(key, str) and KEY_PATTERN.fullmatch(key) is not None

    @classmethod
    def parse(cls, model_name: str, model_id, key: str, value) -> "SortedSetDirective":
        key_match = KEY_PATTERN.fullmatch(key) if isinstance(key, str) else None
        if key_match is None:
            raise MalformedScoreDirective(f"'{key}' is not a score_[for|by] key")

        value_match = VALUE_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if value_match is None:
            raise MalformedScoreDirective(
                f"Value {value!r} of '{key}' must look like [<subkey>|<score>]"
            )

        directive = cls(
            model_name=model_name,
            model_id=model_id,
            dimension=key_match.group(1),
            by=key_match.group(2),
            subkey=value_match.group(1),
            score_source=value_match.group(2),
        )
        if directive.by == DATE_DIMENSION:
            _date_to_epoch(directive.score_source)
        return directive

    @property
    def key(self) -> str:
        model_key = pluralize(underscore(self.model_name)).lower()
        return f"{model_key}_for_{self.dimension}_by_{self.by}:{self.subkey}"

    @property
    def score(self):
        if self.by == DATE_DIMENSION:
            return _date_to_epoch(self.score_source)
        return self.score_source

    @property
    def member(self):
        return self.model_id

    def to_command(self) -> SortedSetAdd:
        return SortedSetAdd(self.key, self.score, self.member)

    def to_wire(self) -> str:
        return self.to_command().to_wire()


def _date_to_epoch(text: str) -> float:
    # fromisoformat alone also takes 20120304 and week dates
    if DATE_PATTERN.fullmatch(text) is None:
        raise MalformedScoreDirective(f"Score '{text}' is not a YYYY-MM-DD date")
    try:
        day = date.fromisoformat(text)
    except ValueError as exc:
        raise MalformedScoreDirective(f"Score '{text}' is not a YYYY-MM-DD date") from exc
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return midnight.timestamp()
