"""Session guards.

Authentication and role assignment belong to the host application; it stores
``user_id``, ``role`` and ``name`` in the Flask session and these guards only
read them.
"""
from __future__ import annotations

from functools import wraps

from flask import current_app, flash, redirect, render_template, request, session

from ..core.enums import Role


def current_role() -> str | None:
    return session.get("role")


def is_admin_session() -> bool:
    admin_roles = current_app.config.get("ADMIN_ROLES") or {Role.ADMIN.value, Role.FINANZAS_SENIOR.value}
    return current_role() in set(admin_roles)


def _login_redirect():
    return redirect(current_app.config.get("LOGIN_URL", "/login"))


def render_forbidden():
    current_user = {"full_name": session.get("name"), "role": session.get("role")}
    return render_template("403.html", current_user=current_user), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            if request.path.startswith("/api/"):
                return {"success": False, "message": "Sesión no iniciada"}, 401
            flash("Inicia sesión para continuar.", "warning")
            return _login_redirect()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return _login_redirect()
        if not is_admin_session():
            return render_forbidden()
        return view(*args, **kwargs)

    return wrapper
