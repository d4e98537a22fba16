"""Write the OpenAPI document for the task API to a file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from src.setup.api_config import ApiSettings, get_api_settings
from src.taskmanager.infrastructure.memory.repositories import InMemoryTaskStore
from src.taskmanager.presentation.main import create_app

logger = logging.getLogger(__name__)


def build_openapi(settings: ApiSettings | None = None) -> dict[str, Any]:
    # Schema generation never touches storage, so no database is needed.
    app = create_app(store=InMemoryTaskStore(), settings=settings)
    return app.openapi()


def export_openapi(output: Path, settings: ApiSettings | None = None) -> Path:
    schema = build_openapi(settings or get_api_settings())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    logger.info("OpenAPI document written", extra={"output": str(output)})
    return output


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("openapi.json"),
        help="Destination file (default: openapi.json).",
    )
    args = parser.parse_args(argv)
    export_openapi(args.output)


if __name__ == "__main__":
    main()
