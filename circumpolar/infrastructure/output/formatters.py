"""Output formatting services for console display."""

import json

from circumpolar.domain.models.results import CalculationReport


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
        elif isinstance(v, list):
            d[k] = [
                _format_dict_floats(i, precision)
                if isinstance(i, dict)
                else (round(i, precision) if isinstance(i, float) else i)
                for i in v
            ]
    return d


def _build_output_list(report: CalculationReport, precision: int = 6) -> list[dict]:
    return [
        _format_dict_floats(result.to_dict(report.declination), precision)
        for result in report.results
    ]


def _whole_degrees(angle: float) -> int:
    """Round a compass angle to whole degrees, so 359.6 reads as 0."""
    return round(angle) % 360


def format_header(report: CalculationReport) -> str:
    reference = report.reference
    sphere = report.sphere

    header = (
        f"Distances from {reference.lat:.3f}, {reference.lon:.3f} "
        f"[using a {sphere.radius:.1f} {sphere.unit} radius"
    )
    if report.declination is not None:
        header += f". Magnetic declination there is {report.declination:.2f}"
    return header + "]"


def format_rows(report: CalculationReport) -> list[str]:
    unit = report.sphere.unit
    rows = []
    for result in report.targets:
        coord = result.coordinate
        row = (
            f" {coord.lat:<8.3f} {coord.lon:<8.3f}    "
            f"{result.distance:.0f} {unit}\t{_whole_degrees(result.heading)}°"
        )
        magnetic = result.magnetic_heading(report.declination)
        if magnetic is not None:
            row += f"\t[{_whole_degrees(magnetic)}°]"
        rows.append(row)
    return rows


class ConsoleOutputFormatter:
    """Format calculation results as text columns"""

    def format_result(self, report: CalculationReport) -> None:
        print(format_header(report))
        for row in format_rows(report):
            print(row)


class JSONOutputFormatter:
    """Format calculation results as JSON (for API/automation)"""

    def __init__(self, indent: int | None = None, precision: int = 6):
        self.indent = indent
        self.precision = precision

    def format_result(self, report: CalculationReport) -> str:
        output_list = _build_output_list(report, self.precision)
        return json.dumps(output_list, indent=self.indent, ensure_ascii=False)
