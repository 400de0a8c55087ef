"""JSON report rendering."""

import json
from datetime import datetime
from pathlib import Path
from urllib.parse import urlsplit

from authscout.modules.scanner.models import ScanResult


def render_json(result: ScanResult, indent: int | None = 2) -> str:
    """Serialize a scan result with its stable camelCase field names."""
    return json.dumps(result.to_dict(), indent=indent)


def write_json_report(result: ScanResult, report_dir: Path) -> Path:
    """Write a timestamped JSON report into ``report_dir``."""
    report_dir = Path(report_dir)
    report_dir.mkdir(parents=True, exist_ok=True)
    host = (urlsplit(result.url).hostname or "target").replace(".", "_")
    generated_at = datetime.now()
    report_file = report_dir / f"authscan_{host}_{generated_at.strftime('%Y%m%d_%H%M%S')}.json"
    report_file.write_text(render_json(result), encoding="utf-8")
    return report_file
