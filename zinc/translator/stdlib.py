# Copyright (c) Meta Platforms, Inc. and affiliates.
# Modifications copyright (c) 2025 Logan Martel.
# Adapted from https://github.com/meta-pytorch/KernelAgent (Apache-2.0).

"""Renders the ``zincstd`` shim injected in place of the import marker."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, Template

DEFAULT_TEMPLATE = "zincstd.cpp.j2"
DEFAULT_INCLUDES = ("iostream", "string", "type_traits")


class StdlibRenderer:
    """Loads the shim template from the bundled or override directories."""

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        *,
        extra_dirs: Optional[Sequence[Path]] = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        if templates_dir is not None:
            base_dir = Path(templates_dir)
        else:
            base_dir = Path(__file__).parent / "templates"
        if not base_dir.exists():
            raise FileNotFoundError(
                f"Templates directory not found: {base_dir}"
            )

        paths = []
        for override in extra_dirs or ():
            override_path = Path(override)
            if not override_path.exists():
                raise FileNotFoundError(
                    f"Stdlib override directory not found: {override_path}"
                )
            paths.append(override_path)
        paths.append(base_dir)

        self._base_dir = base_dir
        self._search_paths = tuple(paths)
        self._template_name = template_name
        self._env = Environment(
            loader=ChoiceLoader(
                [FileSystemLoader(str(path)) for path in self._search_paths]
            ),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def search_paths(self) -> tuple[Path, ...]:
        return self._search_paths

    def render(self, includes: Sequence[str] = DEFAULT_INCLUDES) -> str:
        """Return the shim as one block of text without a trailing newline."""

        return self._get_template().render(includes=list(includes))

    def _get_template(self) -> Template:
        try:
            return self._env.get_template(self._template_name)
        except Exception as exc:  # pragma: no cover - jinja handles specifics
            raise FileNotFoundError(
                f"Template '{self._template_name}' not found in "
                f"{', '.join(str(path) for path in self._search_paths)}"
            ) from exc


def render_stdlib() -> str:
    """Render the bundled shim with the default includes."""

    return StdlibRenderer().render()


__all__ = [
    "DEFAULT_INCLUDES",
    "DEFAULT_TEMPLATE",
    "StdlibRenderer",
    "render_stdlib",
]
