"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.jornada_system.jornada_system.container import build_container
from src.jornada_system.jornada_system.core.enums import RangeType


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, jornada_rules=settings.JORNADA_RULES)

    for colaborador in container.colaborador_service.list_all():
        panel = container.jornada_service.get_panel(colaborador)
        print(colaborador.full_name, "->", panel.status.label, [b.label for b in panel.buttons if b.allowed])

    report = container.report_service.build_admin_report(
        reference=container.jornada_service.now().date(),
        range_type=RangeType.WEEK,
    )
    print(report.range_label)
    for s in report.summary:
        print(f"  {s['colaborador']}: {s['total_worked']}")


if __name__ == "__main__":
    main()
