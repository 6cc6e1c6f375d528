from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_time
from ..core.constants import ALL_COLABORADORES
from ..core.enums import RangeType
from ..jornada.repository import JornadaRepository
from ..jornada.status import admin_status
from .calculator.base import WorkedTimeCalculator, format_worked
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .ranges import describe_range, long_date_es, resolve_range


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    range_type: RangeType
    range_label: str
    colaborador_id: Optional[str]
    rows: list[dict]
    summary: list[dict]


def normalize_colaborador_filter(value: Optional[str]) -> Optional[str]:
    """``todos`` or blank means every colaborador."""
    if not value or value.strip().lower() == ALL_COLABORADORES:
        return None
    return value.strip()


class JornadaReportService:
    def __init__(
        self,
        jornadas: JornadaRepository,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._jornadas = jornadas
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def build_admin_report(
        self,
        *,
        reference: date,
        range_type: RangeType = RangeType.DAY,
        colaborador_id: Optional[str] = None,
    ) -> ReportData:
        start, end = resolve_range(reference, range_type)
        colaborador_id = normalize_colaborador_filter(colaborador_id)
        query_rows = self._jornadas.list_range(start_date=start, end_date=end, colaborador_id=colaborador_id)

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in query_rows:
            j = r.jornada
            marks = j.marks
            minutes = self._calculator.worked_minutes(marks)
            view = admin_status(marks)

            out_rows.append(
                {
                    "jornada_id": j.jornada_id,
                    "colaborador_id": j.colaborador_id,
                    "colaborador": r.colaborador_name,
                    "work_date": j.work_date.strftime("%Y-%m-%d"),
                    "date_label": long_date_es(j.work_date),
                    "status": view.label,
                    "css_class": view.css_class,
                    "shift_start": format_time(j.shift_start),
                    "lunch_start": format_time(j.lunch_start),
                    "lunch_end": format_time(j.lunch_end),
                    "shift_end": format_time(j.shift_end),
                    "worked": self._calculator.display(marks),
                    "worked_minutes": minutes,
                }
            )

            s = summary_map.get(j.colaborador_id)
            if not s:
                s = {
                    "colaborador_id": j.colaborador_id,
                    "colaborador": r.colaborador_name,
                    "days": 0,
                    "total_minutes": 0,
                }
                summary_map[j.colaborador_id] = s
            s["days"] += 1
            s["total_minutes"] += minutes

        summary = sorted(summary_map.values(), key=lambda x: x["total_minutes"], reverse=True)
        for s in summary:
            s["total_worked"] = format_worked(s["total_minutes"])

        return ReportData(
            start=start,
            end=end,
            range_type=range_type,
            range_label=describe_range(reference, range_type),
            colaborador_id=colaborador_id,
            rows=out_rows,
            summary=summary,
        )
