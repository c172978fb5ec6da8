"""Conformance runner comparing the transcoder with the platform UTF-8 encoder."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .decoder import decode
from .errors import TranscodeError
from .transcoder import transcode
from .units import units_from_string


Transcoder = Callable[[str], bytes]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleSpec:
    """A named input string checked by the conformance runner."""

    name: str
    text: str


DEFAULT_SAMPLES: Tuple[SampleSpec, ...] = (
    SampleSpec("empty", ""),
    SampleSpec("ascii", "a"),
    SampleSpec("latin", "ø"),
    SampleSpec("one-byte-max", "\x7f"),
    SampleSpec("two-byte-min", "\x80"),
    SampleSpec("two-byte-max", "\u07ff"),
    SampleSpec("three-byte-min", "\u0800"),
    SampleSpec("three-byte-max", "\uffff"),
    SampleSpec("four-byte-min", "\U00010000"),
    SampleSpec("four-byte-max", "\U0010ffff"),
    SampleSpec("emoji", "\U0001f600"),
    SampleSpec("demo", "\U0001f600\U0001f3f3\ufe0f\u200d\U0001f308aaabbcØ"),
    SampleSpec("lone-high-surrogate", "\ud800"),
    SampleSpec("lone-low-surrogate", "\udc00x"),
)


def load_samples(path: Path) -> List[SampleSpec]:
    """Read a JSON list of ``{"name": ..., "text": ...}`` objects."""
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    return [SampleSpec(name=str(item["name"]), text=str(item["text"])) for item in raw]


class ConformanceRunner:
    """Run samples through the transcoder and capture comparison artifacts."""

    def __init__(
        self,
        artifacts_path: Path,
        transcoder: Optional[Transcoder] = None,
    ) -> None:
        self.artifacts_path = artifacts_path
        self.transcoder = transcoder or transcode
        self.artifacts_path.mkdir(parents=True, exist_ok=True)

    def run(
        self,
        samples: Iterable[SampleSpec],
        notes: Optional[str] = None,
    ) -> Dict[str, object]:
        """Check every sample and write artifacts.

        Returns the aggregated result payload.
        """
        aggregated: Dict[str, object] = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "notes": notes or "",
            "totals": {"matched": 0, "mismatched": 0, "rejected": 0},
            "samples": [],
        }
        scorecard_rows: List[str] = []

        for sample in samples:
            payload = self.check(sample)
            aggregated["samples"].append(payload)
            aggregated["totals"][payload["status"]] += 1
            self._write_sample_artifacts(sample.name, payload)
            scorecard_rows.append(self._format_scorecard_row(payload, notes))

        _logger.debug("conformance totals: %s", aggregated["totals"])
        self._write_aggregated_artifacts(aggregated, scorecard_rows)
        return aggregated

    def check(self, sample: SampleSpec) -> Dict[str, object]:
        """Compare one sample against ``str.encode("utf-8")``."""
        units = units_from_string(sample.text)
        reference = self._reference(sample.text)
        payload: Dict[str, object] = {
            "sample": sample.name,
            "text": sample.text,
            "units": len(units),
            "code_points": None,
            "transcoded": None,
            "reference": reference.hex() if reference is not None else None,
            "error": "",
        }

        try:
            payload["code_points"] = len(decode(units))
            transcoded = self.transcoder(sample.text)
        except TranscodeError as exc:
            payload["status"] = "rejected"
            payload["error"] = f"{type(exc).__name__}: {exc}"
            return payload

        payload["transcoded"] = transcoded.hex()
        payload["status"] = "matched" if transcoded == reference else "mismatched"
        return payload

    @staticmethod
    def _reference(text: str) -> Optional[bytes]:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError:
            return None

    def _write_sample_artifacts(self, sample_name: str, payload: Dict[str, object]) -> None:
        safe_name = re.sub(r"[^A-Za-z0-9_.-]", "_", sample_name)
        path = self.artifacts_path / f"conformance_{safe_name}.json"
        with path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)

    def _write_aggregated_artifacts(
        self,
        aggregated: Dict[str, object],
        scorecard_rows: List[str],
    ) -> None:
        summary_path = self.artifacts_path / "conformance_results.json"
        with summary_path.open("w", encoding="utf-8") as handle:
            json.dump(aggregated, handle, indent=2)

        markdown_path = self.artifacts_path / "conformance_results.md"
        with markdown_path.open("w", encoding="utf-8") as handle:
            handle.write("# Conformance Results\n\n")
            handle.write(f"Generated: {aggregated['generated_at']}\n\n")
            for metric, value in aggregated["totals"].items():
                handle.write(f"- {metric}: {value}\n")
            handle.write("\n")
            for sample in aggregated.get("samples", []):
                handle.write(f"## {sample['sample']}\n\n")
                handle.write(f"Status: {sample['status']}\n\n")
                handle.write(f"- transcoded: {sample['transcoded'] or '-'}\n")
                handle.write(f"- reference: {sample['reference'] or '-'}\n")
                if sample["error"]:
                    handle.write(f"- error: {sample['error']}\n")
                handle.write("\n")

        scorecard_path = self.artifacts_path / "conformance_scorecard.csv"
        header = "sample,status,units,code_points,transcoded,reference,notes\n"
        scorecard_path.write_text(header + "".join(scorecard_rows), encoding="utf-8")

    @staticmethod
    def _format_scorecard_row(payload: Dict[str, object], notes: Optional[str]) -> str:
        code_points = payload.get("code_points")
        fields = [
            str(payload.get("sample", "")),
            str(payload.get("status", "")),
            str(payload.get("units", 0)),
            "" if code_points is None else str(code_points),
            str(payload.get("transcoded") or ""),
            str(payload.get("reference") or ""),
            notes or "",
        ]
        return ",".join(fields) + "\n"
