"""Analytics configuration and environment setup."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from pathlib import Path

import yaml

from hr_analytics.utils.io import load_toml_config

type ConfigDict = dict[str, str | int | bool | list[str] | dict]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_FORMATS = ("csv", "json", "parquet", "excel")


@dataclass(frozen=True)
class DataConfig:
    data_path: Path
    as_of: datetime | None = None


@dataclass(frozen=True)
class ReportConfig:
    top_performers: int
    output_dir: Path
    output_format: str


@dataclass(frozen=True)
class AnalyticsConfig:
    env: str
    data: DataConfig
    report: ReportConfig


def load_analytics_config(env: str = "production", root: Path | None = None) -> AnalyticsConfig:
    """Build the config for an environment, then apply file overrides.

    Overrides come from ``hr_analytics.yaml`` when present, otherwise from
    ``[tool.hr_analytics]`` in ``pyproject.toml``.
    """
    root = root or PROJECT_ROOT

    match env:
        case "production":
            data = DataConfig(data_path=Path("data/hr_analytics_sample.csv"))
            report = ReportConfig(top_performers=10, output_dir=Path("output/hr"), output_format="json")
        case "staging":
            data = DataConfig(data_path=Path("data/staging/hr_analytics_sample.csv"))
            report = ReportConfig(top_performers=10, output_dir=Path("output/staging/hr"), output_format="json")
        case "development":
            data = DataConfig(data_path=Path("data/dev/hr_analytics_sample.csv"))
            report = ReportConfig(top_performers=5, output_dir=Path("output/dev/hr"), output_format="csv")
        case other:
            raise ValueError(f"Unknown environment: {other}")

    config = AnalyticsConfig(env=env, data=data, report=report)
    return apply_overrides(config, resolve_env_overrides(get_env_config(root), env))


def get_env_config(root: Path | None = None) -> ConfigDict:
    """Read analytics overrides from the project directory."""
    root = root or PROJECT_ROOT

    yaml_path = root / "hr_analytics.yaml"
    if yaml_path.exists():
        with open(yaml_path) as f:
            return yaml.safe_load(f) or {}

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        logger.debug("No config file under %s, using defaults", root)
        return {}
    data = load_toml_config(pyproject)
    return data.get("tool", {}).get("hr_analytics", {})


def _parse_as_of(value: str | datetime | None) -> datetime | None:
    match value:
        case None | "":
            return None
        case datetime():
            return value
        case date():
            return datetime(value.year, value.month, value.day)
        case str():
            return datetime.fromisoformat(value)
        case _:
            raise ValueError(f"Invalid as_of value: {value!r}")


def apply_overrides(config: AnalyticsConfig, overrides: ConfigDict) -> AnalyticsConfig:
    data = config.data
    report = config.report

    if "data_path" in overrides:
        data = replace(data, data_path=Path(overrides["data_path"]))
    if "as_of" in overrides:
        data = replace(data, as_of=_parse_as_of(overrides["as_of"]))
    if "top_performers" in overrides:
        report = replace(report, top_performers=int(overrides["top_performers"]))
    if "output_dir" in overrides:
        report = replace(report, output_dir=Path(overrides["output_dir"]))
    if "output_format" in overrides:
        fmt = str(overrides["output_format"])
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {fmt}")
        report = replace(report, output_format=fmt)

    return replace(config, data=data, report=report)


def resolve_env_overrides(settings: ConfigDict, env: str) -> ConfigDict:
    """Merge the shared settings with the table for ``env``, if any.

    Tables named after other environments are ignored.
    """
    shared = {k: v for k, v in settings.items() if not isinstance(v, dict)}
    specific = settings.get(env, {})
    if not isinstance(specific, dict):
        specific = {}
    return {**shared, **specific}
