"""Typed resource paths for AutoML locations, models and evaluations.

A path is rendered by joining literal collection names and identifier
segments with ``/``. Because no segment may contain ``/``, every rendered
path parses back into the same value object.

Examples:
    >>> path = ModelPath(project_id="p", region="us-central1", model_id="VCN1")
    >>> str(path)
    'projects/p/locations/us-central1/models/VCN1'
    >>> ModelPath.parse(str(path)).resource_id
    'VCN1'
"""

from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_validator


class ResourcePath(BaseModel):
    """Base class for slash-delimited resource paths.

    Subclasses declare ``_template``: a tuple alternating literal collection
    names with the names of the identifier fields that follow them.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    _template: ClassVar[tuple[str, ...]] = ()

    project_id: str
    region: str

    @field_validator("*")
    @classmethod
    def validate_segment(cls, v: str) -> str:
        """Each identifier must be a single, non-empty path segment."""
        if not v:
            raise ValueError("path segment must not be empty")
        if "/" in v:
            raise ValueError(f"path segment {v!r} must not contain '/'")
        return v

    def segments(self) -> list[str]:
        """Return the rendered path segments in order."""
        parts = []
        for i, item in enumerate(self._template):
            parts.append(item if i % 2 == 0 else getattr(self, item))
        return parts

    @property
    def resource_id(self) -> str:
        """The bare identifier of the resource (the last segment)."""
        return getattr(self, self._template[-1])

    @classmethod
    def parse(cls, name: str) -> Self:
        """Rebuild a path from its rendered form.

        Args:
            name: Rendered resource name, e.g. ``projects/p/locations/r/models/m``.

        Returns:
            The matching path value object.

        Raises:
            ValueError: If the name does not follow this path's template.
        """
        parts = name.split("/")
        if len(parts) != len(cls._template):
            raise ValueError(
                f"{name!r} is not a valid {cls.__name__}: expected "
                f"{'/'.join(cls._placeholder_template())}"
            )

        values = {}
        for i, (expected, actual) in enumerate(zip(cls._template, parts)):
            if i % 2 == 0:
                if expected != actual:
                    raise ValueError(
                        f"{name!r} is not a valid {cls.__name__}: expected "
                        f"'{expected}' at segment {i}, found '{actual}'"
                    )
            else:
                values[expected] = actual

        return cls(**values)

    @classmethod
    def _placeholder_template(cls) -> list[str]:
        return [
            item if i % 2 == 0 else "{" + item + "}"
            for i, item in enumerate(cls._template)
        ]

    def __str__(self) -> str:
        return "/".join(self.segments())


class LocationPath(ResourcePath):
    """A project and region pair, the parent of models and operations."""

    _template: ClassVar[tuple[str, ...]] = (
        "projects",
        "project_id",
        "locations",
        "region",
    )


class ModelPath(ResourcePath):
    """Full resource name of a model."""

    _template: ClassVar[tuple[str, ...]] = (
        "projects",
        "project_id",
        "locations",
        "region",
        "models",
        "model_id",
    )

    model_id: str

    @property
    def location(self) -> LocationPath:
        """The location that owns this model."""
        return LocationPath(project_id=self.project_id, region=self.region)


class ModelEvaluationPath(ResourcePath):
    """Full resource name of one evaluation of a model."""

    _template: ClassVar[tuple[str, ...]] = (
        "projects",
        "project_id",
        "locations",
        "region",
        "models",
        "model_id",
        "modelEvaluations",
        "evaluation_id",
    )

    model_id: str
    evaluation_id: str

    @property
    def model(self) -> ModelPath:
        """The model this evaluation belongs to."""
        return ModelPath(
            project_id=self.project_id, region=self.region, model_id=self.model_id
        )
