# config.py
import os
from dataclasses import dataclass

import yaml

from producer import DEFAULT_EMISSIONS, GENERATION_TIME

DEFAULT_CONFIG_PATH = "configs/line.yaml"


def _section(config, name):
    # "producer:" with every key commented out loads as None
    section = config.get(name)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ValueError(f"{name} must be a mapping, got {section!r}")
    config[name] = section
    return section


def load_config(path: str = DEFAULT_CONFIG_PATH) -> dict:
    config = {}
    if path and os.path.exists(path):
        with open(path, "r", encoding="utf-8") as file:
            y = yaml.safe_load(file) or {}
            if isinstance(y, dict):
                config = y

    producer = _section(config, "producer")
    producer.setdefault("emissions", DEFAULT_EMISSIONS)
    producer.setdefault("period_s", float(GENERATION_TIME))
    producer.setdefault("seed", None)

    consumer = _section(config, "consumer")
    consumer.setdefault("time_unit_s", 1.0)
    consumer.setdefault("poll_interval_s", 0.5)

    return config


def _number(section, key, cast, minimum, strict=False):
    value = section.get(key)
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        number = cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None
    if cast is int and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    if number < minimum or (strict and number == minimum):
        op = ">" if strict else ">="
        raise ValueError(f"{key} must be {op} {minimum}, got {value!r}")
    return number


@dataclass(frozen=True)
class LineConfig:
    emissions: int = DEFAULT_EMISSIONS
    period_s: float = float(GENERATION_TIME)
    time_unit_s: float = 1.0
    poll_interval_s: float = 0.5
    seed: object = None

    @classmethod
    def from_dict(cls, config):
        p = _section(dict(config), "producer")
        c = _section(dict(config), "consumer")
        return cls(
            emissions=_number(p, "emissions", int, 0),
            period_s=_number(p, "period_s", float, 0.0),
            time_unit_s=_number(c, "time_unit_s", float, 0.0),
            poll_interval_s=_number(c, "poll_interval_s", float, 0.0, strict=True),
            seed=p.get("seed"),
        )

    def updated(self, **overrides):
        """Copy with the non-None overrides applied (CLI flags)."""
        values = dict(self.__dict__)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return LineConfig.from_dict({
            "producer": {"emissions": values["emissions"], "period_s": values["period_s"],
                         "seed": values["seed"]},
            "consumer": {"time_unit_s": values["time_unit_s"],
                         "poll_interval_s": values["poll_interval_s"]},
        })
