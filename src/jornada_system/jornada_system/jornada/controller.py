from __future__ import annotations

import logging

from flask import Flask, abort, flash, jsonify, redirect, render_template, request, session, url_for

from ..common.auth import admin_required, current_role, is_admin_session, login_required
from ..common.datetime_utils import parse_iso_datetime
from ..container import Container
from ..core.enums import JornadaAction
from ..core.exceptions import AuthorizationError, BackendError, NotFoundError, ValidationError
from .model import TIME_FIELDS, ShiftMarks
from .service import success_message
from .status import admin_status, derive_status

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_action(value: str) -> JornadaAction:
        try:
            return JornadaAction(value)
        except ValueError:
            abort(404)

    def _run(fn, *, success: str) -> bool:
        """Run one write and flash the outcome. Prior state is untouched on error."""
        try:
            fn()
        except (ValidationError, NotFoundError, AuthorizationError) as e:
            flash(str(e), "warning")
            return False
        except BackendError as e:
            flash(f"Error en la operación: {e}", "danger")
            return False
        except Exception:
            logger.exception("Unexpected error in jornada action")
            flash("Error del sistema al registrar la jornada", "danger")
            return False
        flash(success, "success")
        return True

    @app.route("/jornada", methods=["GET"], endpoint="jornada")
    @login_required
    def jornada():
        try:
            colaborador = container.colaborador_service.get_profile(session.get("user_id"))
            if not colaborador:
                return render_template("jornada/no_profile.html", active_page="jornada")
            panel = container.jornada_service.get_panel(colaborador)
        except BackendError as e:
            return render_template("jornada/no_profile.html", error=str(e), active_page="jornada")

        return render_template(
            "jornada/clock.html",
            panel=panel,
            action_url=lambda action: url_for("jornada_action", action=action.value),
            refresh_seconds=container.gate_refresh_seconds,
            is_admin=is_admin_session(),
            active_page="jornada",
        )

    @app.route("/jornada/<action>", methods=["POST"], endpoint="jornada_action")
    @login_required
    def jornada_action(action: str):
        act = _parse_action(action)
        try:
            colaborador = container.colaborador_service.get_profile(session.get("user_id"))
        except BackendError as e:
            flash(f"Error en la operación: {e}", "danger")
            return redirect(url_for("jornada"))
        if not colaborador:
            flash("Tu cuenta no está vinculada a un perfil de colaborador.", "warning")
            return redirect(url_for("jornada"))

        _run(
            lambda: container.jornada_service.perform(colaborador.colaborador_id, act),
            success=success_message(act, colaborador),
        )
        return redirect(url_for("jornada"))

    @app.route("/jornada/historial", methods=["GET"], endpoint="jornada_history")
    @login_required
    def jornada_history():
        page = request.args.get("page", "1")
        page = int(page) if page.isdigit() and int(page) > 0 else 1

        try:
            colaborador = container.colaborador_service.get_profile(session.get("user_id"))
            if not colaborador:
                return render_template("jornada/no_profile.html", active_page="jornada_history")
            data = container.jornada_service.get_history_ui(colaborador.colaborador_id, page=page)
        except BackendError as e:
            return render_template("jornada/no_profile.html", error=str(e), active_page="jornada_history")
        return render_template(
            "jornada/history.html",
            colaborador=colaborador,
            data=data,
            page=page,
            has_next=len(data) >= container.jornada_service.history_page_size,
            active_page="jornada_history",
        )

    @app.route("/api/jornada/acciones", methods=["GET"], endpoint="api_jornada_actions")
    @login_required
    def api_jornada_actions():
        """Re-evaluate the gate against the wall clock.

        The page sends the timestamps it already shows; nothing is read from the store.
        """
        try:
            marks = ShiftMarks(
                shift_start=parse_iso_datetime(request.args.get("shift_start")),
                lunch_start=parse_iso_datetime(request.args.get("lunch_start")),
                lunch_end=parse_iso_datetime(request.args.get("lunch_end")),
                shift_end=parse_iso_datetime(request.args.get("shift_end")),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        bypass = request.args.get("bypass") == "1" and is_admin_session()
        in_flight = request.args.get("in_flight") == "1"
        now = container.jornada_service.now()
        buttons = container.jornada_service.evaluate_actions(marks, now=now, bypass=bypass, in_flight=in_flight)

        return jsonify(
            {
                "success": True,
                "now": now.isoformat(timespec="seconds"),
                "status": derive_status(marks).value,
                "actions": [
                    {
                        "action": b.action.value,
                        "label": b.label,
                        "allowed": b.allowed,
                        "reason": b.reason,
                    }
                    for b in buttons
                ],
            }
        )

    @app.route("/admin/jornada/registrar", methods=["GET"], endpoint="admin_jornada_clock")
    @admin_required
    def admin_jornada_clock():
        selected_id = request.args.get("colaborador_id") or None
        panel = None
        try:
            colaboradores = container.colaborador_service.list_all()
            selected = next((c for c in colaboradores if c.colaborador_id == selected_id), None)
            if selected:
                panel = container.jornada_service.get_panel(selected, bypass=True)
        except BackendError as e:
            flash(f"Error en la operación: {e}", "danger")
            colaboradores = []

        return render_template(
            "admin/clock.html",
            colaboradores=colaboradores,
            selected_id=selected_id,
            panel=panel,
            action_url=lambda action: url_for(
                "admin_jornada_action", colaborador_id=selected_id, action=action.value
            ),
            refresh_seconds=container.gate_refresh_seconds,
            active_page="admin_jornada_clock",
        )

    @app.route(
        "/admin/jornada/registrar/<colaborador_id>/<action>",
        methods=["POST"],
        endpoint="admin_jornada_action",
    )
    @admin_required
    def admin_jornada_action(colaborador_id: str, action: str):
        act = _parse_action(action)
        try:
            colaborador = container.colaborador_service.get(colaborador_id)
        except (NotFoundError, BackendError) as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_jornada_clock"))

        _run(
            lambda: container.admin_jornada_service.assisted_action(
                current_role=current_role(),
                colaborador_id=colaborador_id,
                action=act,
            ),
            success=success_message(act, colaborador),
        )
        return redirect(url_for("admin_jornada_clock", colaborador_id=colaborador_id))

    @app.route("/admin/jornadas/<int:jornada_id>/editar", methods=["GET", "POST"], endpoint="admin_jornada_edit")
    @admin_required
    def admin_jornada_edit(jornada_id: int):
        if request.method == "POST":
            try:
                result = container.admin_jornada_service.edit_times(
                    current_role=current_role(),
                    jornada_id=jornada_id,
                    values={name: request.form[name] for name in TIME_FIELDS if name in request.form},
                )
            except (ValidationError, NotFoundError, AuthorizationError) as e:
                flash(f"Error al actualizar: {e}", "warning")
                return redirect(url_for("admin_jornada_edit", jornada_id=jornada_id))
            except BackendError as e:
                flash(f"Error al actualizar: {e}", "danger")
                return redirect(url_for("admin_jornada_edit", jornada_id=jornada_id))

            flash("Registro de jornada actualizado correctamente.", "success")
            for warning in result.warnings:
                flash(f"Atención: {warning}", "warning")
            return redirect(
                url_for("admin_jornadas", fecha=result.jornada.work_date.strftime("%Y-%m-%d"))
            )

        try:
            form = container.admin_jornada_service.get_edit_form(current_role=current_role(), jornada_id=jornada_id)
        except NotFoundError:
            abort(404)
        except BackendError as e:
            flash(f"Error en la operación: {e}", "danger")
            return redirect(url_for("admin_jornadas"))

        return render_template(
            "admin/edit_jornada.html",
            form=form,
            status=admin_status(form.jornada.marks),
            active_page="admin_jornadas",
        )
