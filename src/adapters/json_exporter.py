"""Exportación JSON del plan de exportación.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines que consumen el plan.
- Permite revisar qué se escribirá sin ejecutar la exportación.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.services.export_plan import PlannedOutput


def export_plan_json(*, planned: list[PlannedOutput], output_path: Path) -> Path:
    """Exporta el plan a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [
        {
            "source": item.source,
            "format": item.format_name,
            "output_file": str(item.output_file),
        }
        for item in planned
    ]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
