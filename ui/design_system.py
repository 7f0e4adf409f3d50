"""
Nexa Studio Design System

Design tokens (colors, spacing, radii) and shared component stylesheets for
the desktop client. Dark theme with a violet accent, as on the website.
"""

from app.config import Config


class Colors:
    """Color palette."""
    BACKGROUND = Config.PRIMARY_COLOR
    SURFACE = "#111119"
    OVERLAY = "rgba(0, 0, 0, 204)"  # 80% black behind the wizard

    ACCENT = Config.ACCENT_COLOR
    ACCENT_HOVER = Config.ACCENT_HOVER
    ACCENT_SOFT = "rgba(124, 58, 237, 25)"  # selected checkbox row

    # Text Colors
    TEXT_PRIMARY = Config.TEXT_COLOR
    TEXT_SECONDARY = Config.TEXT_MUTED
    TEXT_DISABLED = "#6B7280"

    # Inputs
    INPUT_BG = Config.INPUT_BG
    INPUT_BORDER = Config.BORDER_COLOR
    INPUT_BORDER_FOCUS = "rgba(124, 58, 237, 128)"

    # Step indicator
    STEP_INACTIVE = Config.STEP_INACTIVE
    STEP_ACTIVE = Config.ACCENT_COLOR

    # Status Colors
    SUCCESS = Config.SUCCESS_COLOR
    ERROR = Config.ERROR_COLOR


class Spacing:
    """
    Spacing system for consistent layout
    Based on 8px grid system
    """
    XS = 4
    SM = 8
    MD = 16
    LG = 24
    XL = 32

    FORM_FIELD_SPACING = LG
    LABEL_SPACING = SM


class BorderRadius:
    """Border radius values for components"""
    SM = 4
    MD = 8
    LG = 16
    FULL = 9999


class ComponentStyles:
    """Shared stylesheets."""

    TEXT_INPUT = f"""
        QLineEdit, QTextEdit, QComboBox {{
            background-color: rgba(0, 0, 0, 102);
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.INPUT_BORDER};
            border-radius: {BorderRadius.MD}px;
            padding: 10px 14px;
        }}
        QLineEdit:focus, QTextEdit:focus, QComboBox:focus {{
            border: 1px solid {Colors.INPUT_BORDER_FOCUS};
        }}
        QLineEdit:disabled, QTextEdit:disabled, QComboBox:disabled {{
            color: {Colors.TEXT_DISABLED};
        }}
    """

    FIELD_LABEL = "color: #D1D5DB; background: transparent;"

    SERVICE_OPTION = f"""
        QCheckBox {{
            color: {Colors.TEXT_PRIMARY};
            background-color: rgba(0, 0, 0, 102);
            border: 1px solid {Colors.INPUT_BORDER};
            border-radius: {BorderRadius.MD}px;
            padding: 14px;
            spacing: 12px;
        }}
        QCheckBox:checked {{
            border: 1px solid {Colors.ACCENT};
            background-color: {Colors.ACCENT_SOFT};
        }}
    """

    DIALOG = f"""
        QWidget#intakeWizardCard {{
            background-color: {Colors.BACKGROUND};
            border-radius: {BorderRadius.LG}px;
        }}
    """
