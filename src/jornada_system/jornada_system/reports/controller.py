from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.auth import admin_required
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.constants import ALL_COLABORADORES
from ..core.enums import RangeType
from ..core.exceptions import BackendError, ValidationError
from .ranges import parse_range_type

CSV_FIELDS = [
    "work_date",
    "colaborador_id",
    "colaborador",
    "status",
    "shift_start",
    "lunch_start",
    "lunch_end",
    "shift_end",
    "worked",
    "worked_minutes",
]


def register(app: Flask, container: Container) -> None:
    def _filters() -> tuple[date, RangeType, str]:
        reference_s = request.args.get("fecha")
        reference = parse_iso_date(reference_s) if reference_s else date.today()
        range_type = parse_range_type(request.args.get("rango"))
        colaborador_id = request.args.get("colaborador_id") or ALL_COLABORADORES
        return reference, range_type, colaborador_id

    def _write_report_csv(*, data, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/admin/jornadas", methods=["GET"], endpoint="admin_jornadas")
    @admin_required
    def admin_jornadas():
        try:
            reference, range_type, colaborador_id = _filters()
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_jornadas"))

        error = None
        data = None
        colaboradores = []
        try:
            colaboradores = container.colaborador_service.list_all()
            data = container.report_service.build_admin_report(
                reference=reference,
                range_type=range_type,
                colaborador_id=colaborador_id,
            )
        except BackendError as e:
            error = str(e)

        return render_template(
            "admin/jornadas.html",
            fecha=reference.strftime("%Y-%m-%d"),
            rango=range_type.value,
            range_types=list(RangeType),
            colaborador_id=colaborador_id,
            colaboradores=colaboradores,
            data=data,
            error=error,
            active_page="admin_jornadas",
        )

    @app.route("/admin/jornadas.csv", methods=["GET"], endpoint="admin_jornadas_csv")
    @admin_required
    def admin_jornadas_csv():
        try:
            reference, range_type, colaborador_id = _filters()
            data = container.report_service.build_admin_report(
                reference=reference,
                range_type=range_type,
                colaborador_id=colaborador_id,
            )
        except (ValidationError, BackendError) as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_jornadas"))

        filename = f"jornadas_{data.start.strftime('%Y%m%d')}_{data.end.strftime('%Y%m%d')}.csv"
        return _write_report_csv(data=data, filename=filename)
