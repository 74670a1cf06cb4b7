"""DPT Catalog Loader — declares extra datapoint types from YAML.

Catalog files list DPT subtypes as data; each entry becomes one of the
generic kinds in ``dpt.types`` and is added to the registry. A path may be a
single file or a directory scanned for ``*.yaml`` / ``*.yml``.

Catalog YAML format:
    datapoints:
      - id: "9.007"
        kind: float16
        name: Humidity
        unit: "%"
        min: 0
        max: 670760
        format: "{:.2f} %"
      - id: "1.008"
        kind: boolean
        name: UpDown
        labels: [Down, Up]
"""

import logging
import os
import re
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from dpt.codec import register_dpt
from dpt.primitives import f16_resolution
from dpt.types import BooleanType, DatapointType, Float16Type, ScaledByteType

logger = logging.getLogger("dptcodec.catalog")

DEFAULT_CATALOG = os.path.join(os.path.dirname(__file__), "standard.yaml")

_DPT_ID = re.compile(r"^\d+(\.\d{3})?$")


class CatalogError(ValueError):
    """A catalog file or one of its entries is invalid."""


class DatapointDefinition(BaseModel):
    """One catalog entry."""

    id: str = Field(..., description="DPT id (e.g., '9.007')")
    kind: Literal["boolean", "scaled", "float16"]
    name: str = Field(..., min_length=1)
    unit: str = Field(default="")
    min: float | None = Field(default=None, description="Semantic lower bound")
    max: float | None = Field(default=None, description="Semantic upper bound")
    labels: tuple[str, str] | None = Field(
        default=None, description="Display labels for [true, false]"
    )
    format: str | None = Field(default=None, description="Text format, e.g. '{:.2f} %'")
    truncate: bool = Field(default=False, description="Scaled: cut instead of round")
    replace: bool = Field(default=False, description="Override an existing id")

    @model_validator(mode="after")
    def _validate_kind(self):
        if not _DPT_ID.match(self.id):
            raise ValueError(f"Malformed DPT id: {self.id!r}")
        main = self.id.split(".")[0]
        expected = {"boolean": "1", "scaled": "5", "float16": "9"}[self.kind]
        if main != expected:
            raise ValueError(f"DPT {self.id} cannot be of kind {self.kind}")
        if self.kind == "boolean":
            if self.labels is None:
                raise ValueError("Boolean datapoints need labels [true, false]")
        else:
            if self.min is None or self.max is None:
                raise ValueError(f"{self.kind} datapoints need min and max")
            if self.min >= self.max:
                raise ValueError(f"min ({self.min}) must be below max ({self.max})")
            if self.kind == "float16":
                step = f16_resolution(max(abs(self.min), abs(self.max)))
                if self.max - self.min < step:
                    raise ValueError(
                        f"Range [{self.min}, {self.max}] is narrower than one "
                        f"2-byte float step ({step:g})"
                    )
        return self

    def build(self) -> DatapointType:
        """Instantiate the datapoint type this entry describes."""
        if self.kind == "boolean":
            true_label, false_label = self.labels
            return BooleanType(self.id, self.name, true_label, false_label)

        text_format = self.format
        if text_format is None:
            text_format = "{:.2f} " + self.unit if self.unit else "{:.2f}"
        if self.kind == "scaled":
            return ScaledByteType(
                self.id,
                self.name,
                self.unit,
                self.min,
                self.max,
                text_format,
                truncate=self.truncate,
            )
        return Float16Type(
            self.id, self.name, self.unit, self.min, self.max, text_format
        )


class CatalogLoader:
    """Loads catalog files and registers their datapoint types."""

    def __init__(self, registry: Optional[dict] = None):
        # None means the shared codec registry
        self.registry = registry
        self.loaded: list[str] = []

    def load(self, path: str) -> list[DatapointType]:
        """Load a catalog file or every YAML file in a directory."""
        if os.path.isdir(path):
            result = []
            for filename in sorted(os.listdir(path)):
                if filename.endswith((".yaml", ".yml")):
                    result.extend(self.load_file(os.path.join(path, filename)))
            return result
        return self.load_file(path)

    def load_file(self, file_path: str) -> list[DatapointType]:
        """Parse, validate and register one catalog file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {file_path}: {e}") from e
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {file_path}: {e}") from e

        if not data:
            logger.warning("Catalog %s is empty", file_path)
            return []
        if not isinstance(data, dict) or not isinstance(data.get("datapoints"), list):
            raise CatalogError(f"Catalog {file_path} needs a 'datapoints' list")

        definitions = []
        for index, entry in enumerate(data["datapoints"]):
            try:
                definitions.append(DatapointDefinition.model_validate(entry))
            except ValidationError as e:
                raise CatalogError(
                    f"Catalog {file_path} entry {index}: {e}"
                ) from e

        added = []
        for definition in definitions:
            dpt_type = definition.build()
            if register_dpt(dpt_type, self.registry, replace=definition.replace):
                added.append(dpt_type)
            else:
                logger.warning(
                    "Catalog %s: DPT %s already registered, skipped",
                    file_path,
                    dpt_type.id,
                )

        self.loaded.append(file_path)
        logger.info("Loaded %d DPT definitions from %s", len(added), file_path)
        return added


def load_catalog(path: Optional[str] = None, registry: Optional[dict] = None):
    """Load *path* (default: the packaged standard catalog) into the registry."""
    return CatalogLoader(registry).load(path or DEFAULT_CATALOG)
