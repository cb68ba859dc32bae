"""Template catalog for the generated τjs project.

Every file written into a new project is declared here as a
:class:`TemplateFile`. Text files are rendered from the Jinja2 templates in
``create_taujs/templates``; JSON files are built as mappings and serialized
by the generator.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from create_taujs.config import ProjectConfig

__all__ = (
    "APP_TITLE",
    "SCAFFOLD_DIRECTORIES",
    "TEMPLATE_CATALOG",
    "TemplateFile",
    "TemplateKind",
    "get_template_dir",
    "render_template",
)

APP_TITLE = "τjs - Composing systems, not just apps"

SCAFFOLD_DIRECTORIES: tuple[str, ...] = (
    "src/server/services",
    "src/client",
    "src/client/public",
)
"""Directories created before any file is written."""


class TemplateKind(str, Enum):
    """How a template's rendered content is written to disk."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class TemplateFile:
    """A file in the generated project.

    Attributes:
        path: Output path relative to the project root, using ``/`` separators.
        render: Produces the file content from the project configuration.
        kind: ``TEXT`` for literal content, ``JSON`` for a mapping to serialize.
    """

    path: str
    render: "Callable[[ProjectConfig], Any]"
    kind: TemplateKind = TemplateKind.TEXT


def get_template_dir() -> Path:
    """Get the directory containing the Jinja2 project templates.

    Returns:
        Path to the templates directory.
    """
    from create_taujs.utils import get_package_path

    return get_package_path("templates")


def render_template(template_name: str, context: dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is code
    and configuration files, not HTML.

    Args:
        template_name: Template path relative to the templates directory.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    from jinja2 import Environment, FileSystemLoader

    env = Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )
    return env.get_template(template_name).render(**context)


def _template_context(config: "ProjectConfig") -> dict[str, Any]:
    return {
        "project_name": config.project_name,
        "package_manager": config.package_manager.value,
        "script_runner": config.package_manager.script_runner,
        "title": APP_TITLE,
    }


def _render_file(path: str, config: "ProjectConfig") -> str:
    return render_template(f"{path}.j2", _template_context(config))


def _text(path: str) -> TemplateFile:
    return TemplateFile(path=path, render=partial(_render_file, path))


def package_json(config: "ProjectConfig") -> dict[str, Any]:
    """Build the project manifest.

    Scripts are the same for every package manager; only the install step
    shown to the user differs.
    """
    return {
        "name": config.project_name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "scripts": {
            "dev": (
                "NODE_ENV=development tsx watch --ignore vite.config.ts --trace-warnings "
                "--tsconfig ./src/server/tsconfig.json ./src/server/index.ts --loglevel verbose"
            ),
            "build:client": "tsx build.ts",
            "build:entry-server": "BUILD_MODE=ssr tsx build.ts",
            "build:server": (
                "esbuild src/server/index.ts --bundle --platform=node --format=esm "
                "--outfile=dist/server/index.js --external:fastify --external:@taujs/server --external:@taujs/react"
            ),
            "build": "npm run build:client && npm run build:entry-server && npm run build:server",
            "start": "NODE_ENV=production node dist/server/index.js",
            "lint": "tsc --noEmit",
        },
        "dependencies": {
            "@taujs/react": "latest",
            "@taujs/server": "latest",
            "fastify": "^5.6.1",
            "react": "^19.0.0",
            "react-dom": "^19.0.0",
        },
        "devDependencies": {
            "@types/node": "^22.10.5",
            "@types/react": "^19.0.2",
            "@types/react-dom": "^19.0.2",
            "@vitejs/plugin-react": "^4.6.0",
            "tsx": "^4.19.3",
            "typescript": "^5.7.3",
            "vite": "^7.1.11",
        },
    }


def tsconfig_json(config: "ProjectConfig") -> dict[str, Any]:  # noqa: ARG001
    return {
        "compilerOptions": {
            "target": "ES2022",
            "module": "ESNext",
            "lib": ["ES2022", "DOM", "DOM.Iterable"],
            "jsx": "react-jsx",
            "moduleResolution": "bundler",
            "resolveJsonModule": True,
            "allowImportingTsExtensions": True,
            "noEmit": True,
            "isolatedModules": True,
            "esModuleInterop": True,
            "forceConsistentCasingInFileNames": True,
            "strict": True,
            "skipLibCheck": True,
            "types": [],
            "paths": {
                "@client/*": ["./src/client/*"],
                "@server/*": ["./src/server/*"],
            },
        },
        "include": ["src/client/**/*", "src/server/**/*", "taujs.config.ts"],
    }


def server_tsconfig_json(config: "ProjectConfig") -> dict[str, Any]:  # noqa: ARG001
    # used by `tsx watch` in the dev script
    return {
        "extends": "../../tsconfig.json",
        "include": ["./**/*"],
    }


TEMPLATE_CATALOG: tuple[TemplateFile, ...] = (
    TemplateFile("package.json", package_json, TemplateKind.JSON),
    _text("build.ts"),
    TemplateFile("tsconfig.json", tsconfig_json, TemplateKind.JSON),
    TemplateFile("src/server/tsconfig.json", server_tsconfig_json, TemplateKind.JSON),
    _text("taujs.config.ts"),
    _text(".gitignore"),
    _text("README.md"),
    _text("src/client/index.html"),
    _text("src/client/App.tsx"),
    _text("src/client/entry-client.tsx"),
    _text("src/client/entry-server.tsx"),
    _text("src/client/styles.css"),
    _text("src/client/vite-env.d.ts"),
    _text("src/server/index.ts"),
    _text("src/server/services/registry.ts"),
    _text("src/server/services/example.service.ts"),
    _text("src/server/types.d.ts"),
    _text("src/client/public/favicon.svg"),
)
