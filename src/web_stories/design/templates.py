"""Story templates: visual defaults applied across a generated story."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ..errors import TemplateNotFoundError

_logger = logging.getLogger("story_engine")

_CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class TemplateConfig(BaseModel):
    """Colors, font and animation palette for a story.

    ``background_color`` may hold a CSS gradient expression such as
    ``linear-gradient(135deg, #0073aa, #00a0d2)``.
    """

    model_config = _CAMEL_CONFIG

    background_color: str = "#0a0a0f"
    text_color: str = "#ffffff"
    accent_color: str = "#6366f1"
    font_family: str = "Inter, sans-serif"
    animations: list[str] = Field(default_factory=lambda: ["fade-in"], min_length=1)

    @property
    def is_gradient(self) -> bool:
        """Check if the background is a gradient expression."""
        return "gradient" in self.background_color


class TemplateOverrides(BaseModel):
    """Partial TemplateConfig merged over a template at generation time."""

    model_config = _CAMEL_CONFIG

    background_color: Optional[str] = None
    text_color: Optional[str] = None
    accent_color: Optional[str] = None
    font_family: Optional[str] = None
    animations: Optional[Annotated[list[str], Field(min_length=1)]] = None

    def apply(self, config: TemplateConfig) -> TemplateConfig:
        """Return ``config`` with every explicitly set override applied."""
        updates = self.model_dump(exclude_none=True)
        if not updates:
            return config
        return config.model_copy(update=updates)


class StoryTemplate(BaseModel):
    """A named, categorized TemplateConfig."""

    model_config = _CAMEL_CONFIG

    id: str
    name: str
    category: str = "general"
    description: str = ""
    config: TemplateConfig = Field(default_factory=TemplateConfig)


# Pre-built template presets
TEMPLATE_PRESETS: dict[str, StoryTemplate] = {
    "modern": StoryTemplate(
        id="modern",
        name="Modern Gradient",
        category="news",
        description="Blue diagonal gradient with clean sans-serif type",
        config=TemplateConfig(
            background_color="linear-gradient(135deg, #0073aa, #00a0d2)",
            text_color="#ffffff",
            accent_color="#ffb900",
            font_family="Inter, sans-serif",
            animations=["fade-in", "fly-in-bottom", "zoom-in"],
        ),
    ),
    "minimal_dark": StoryTemplate(
        id="minimal_dark",
        name="Minimal Dark",
        category="minimal",
        description="Near-black background with indigo accents",
        config=TemplateConfig(
            background_color="#0a0a0f",
            text_color="#ffffff",
            accent_color="#6366f1",
            font_family="Inter, sans-serif",
            animations=["fade-in"],
        ),
    ),
    "minimal_light": StoryTemplate(
        id="minimal_light",
        name="Minimal Light",
        category="minimal",
        description="White background with dark text",
        config=TemplateConfig(
            background_color="#ffffff",
            text_color="#18181b",
            accent_color="#6366f1",
            font_family="Inter, sans-serif",
            animations=["fade-in", "pan-left"],
        ),
    ),
    "gradient_purple": StoryTemplate(
        id="gradient_purple",
        name="Purple Gradient",
        category="lifestyle",
        description="Indigo to violet gradient",
        config=TemplateConfig(
            background_color="linear-gradient(135deg, #6366f1, #8b5cf6)",
            text_color="#ffffff",
            accent_color="#f59e0b",
            font_family="Poppins, sans-serif",
            animations=["fly-in-left", "fly-in-right", "fade-in"],
        ),
    ),
    "editorial": StoryTemplate(
        id="editorial",
        name="Editorial Serif",
        category="magazine",
        description="Warm paper tones with serif headlines",
        config=TemplateConfig(
            background_color="#f5f0e6",
            text_color="#1f1f1f",
            accent_color="#b91c1c",
            font_family="Georgia, serif",
            animations=["fade-in", "whoosh-in-left"],
        ),
    ),
}


def find_template(template_id: str, templates: list[StoryTemplate]) -> StoryTemplate:
    """Find a template by id.

    Args:
        template_id: Id to look up.
        templates: Candidate templates, searched in order.

    Returns:
        First template whose id matches.

    Raises:
        TemplateNotFoundError: If no template has that id.
    """
    for template in templates:
        if template.id == template_id:
            return template
    raise TemplateNotFoundError(template_id, [t.id for t in templates])


class TemplateRegistry:
    """Registry of story templates.

    Holds the built-in presets and, when a YAML file is given, the templates
    declared in it. File entries replace presets that share the same id.

    Example:
        registry = TemplateRegistry.load(Path("config/templates.yaml"))
        template = registry.get("modern")
        ids = [t.id for t in registry.list_templates()]
    """

    # Default path for config file
    DEFAULT_CONFIG_PATH = Path("config/templates.yaml")

    def __init__(self, templates: list[StoryTemplate] | None = None):
        self._templates: dict[str, StoryTemplate] = {}
        for template in templates if templates is not None else TEMPLATE_PRESETS.values():
            self._templates[template.id] = template

    @classmethod
    def load(cls, config_path: Optional[Path] = None, include_presets: bool = True) -> "TemplateRegistry":
        """Load templates from a YAML file.

        A missing file is not an error; the registry then holds only the presets.

        Args:
            config_path: Path to YAML config. Uses default if None.
            include_presets: Start from the built-in presets.

        Returns:
            TemplateRegistry instance.

        Raises:
            ValueError: If the YAML is not a mapping with a ``templates`` list.
            pydantic.ValidationError: If a template entry is invalid.
        """
        path = config_path or cls.DEFAULT_CONFIG_PATH
        registry = cls(None if include_presets else [])

        if not path.exists():
            _logger.debug(f"TEMPLATES | file={path} | status=missing | using presets")
            return registry

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict) or not isinstance(data.get("templates", []), list):
            raise ValueError(f"Invalid templates file {path}: expected a 'templates' list")

        for entry in data.get("templates", []):
            registry.add(StoryTemplate.model_validate(entry))

        _logger.info(f"TEMPLATES | file={path} | loaded={len(data.get('templates', []))}")
        return registry

    def add(self, template: StoryTemplate) -> None:
        """Register a template, replacing any with the same id."""
        self._templates[template.id] = template

    def get(self, template_id: str) -> StoryTemplate:
        """Get a template by id.

        Raises:
            TemplateNotFoundError: If the id is unknown.
        """
        return find_template(template_id, self.list_templates())

    def list_templates(self) -> list[StoryTemplate]:
        """List registered templates in registration order."""
        return list(self._templates.values())

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)
