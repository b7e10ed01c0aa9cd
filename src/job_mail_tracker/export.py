"""Export stored job records to CSV or JSON."""

import csv
import json

from .models import JobRecord
from .scorer import quality_label, score_record

FIELDNAMES = [
    "id",
    "company",
    "position",
    "status",
    "date_applied",
    "email_from",
    "email_subject",
    "quality",
    "label",
]


def _rows(records: list[JobRecord]) -> list[dict]:
    rows = []
    for record in records:
        row = {
            "id": record.id,
            "company": record.company,
            "position": record.position,
            "status": record.status,
            "date_applied": record.date_applied,
            "email_from": record.email_from,
            "email_subject": record.email_subject,
            "quality": None,
            "label": None,
        }
        if record.is_email_import:
            scored = score_record(record)
            row["quality"] = scored.quality
            row["label"] = quality_label(scored)
        rows.append(row)
    return rows


def export_records(records: list[JobRecord], format: str, output_path: str) -> None:
    """Export records to a file.

    Args:
        records: The stored records to export.
        format: Output format, either 'csv' or 'json'.
        output_path: Path to write the output file.
    """
    rows = _rows(records)

    if format == "csv":
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)
    elif format == "json":
        with open(output_path, "w") as f:
            json.dump(rows, f, indent=2)
    else:
        raise ValueError(f"Unsupported export format: {format}")

    print(f"Results saved to {output_path}")
