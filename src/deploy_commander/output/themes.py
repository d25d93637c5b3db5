"""Severity and resource type color maps."""

from deploy_commander.models.doctor import Severity

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red bold",
}

SEVERITY_ICONS: dict[Severity, str] = {
    Severity.INFO: "i",
    Severity.WARNING: "!",
    Severity.ERROR: "X",
}


def styled_severity_icon(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    icon = SEVERITY_ICONS.get(severity, "?")
    return f"[{color}]{icon}[/{color}]"


def styled_type(type_name: str) -> str:
    # Qualified kubernetes types in green, everything else left plain.
    if type_name.startswith("kubernetes."):
        return f"[green]{type_name}[/green]"
    return type_name
