"""
Named constants shared by the conversion, contrast and theme modules.

Everything here is read-only module state; there are no config files or
environment variables behind it.
"""

# ==========================================
# Channel bounds
# ==========================================
HEX_DIGITS = 6                     # Hex color length without the leading '#'
RGB_MAX = 255                      # 8-bit channel ceiling
HUE_MAX = 360                      # Full circle degrees
PERCENT_MAX = 100                  # Saturation, lightness and CMYK ink ceiling
HUE_SECTOR = 60.0                  # Degrees per HSL sector
CHANNEL_DECIMALS = 2               # Fractional digits kept on HSL and CMYK output

# ==========================================
# YIQ heuristic
# ==========================================
YIQ_R = 299
YIQ_G = 587
YIQ_B = 114
YIQ_DIVISOR = 1000
YIQ_THRESHOLD = 128                # yiq >= threshold -> black foreground

# ==========================================
# Relative luminance (Source: ITU-R BT.709 / WCAG 2.x)
# ==========================================
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
SRGB_TO_LINEAR_TH = 0.03928        # WCAG 2.x threshold, not the IEC 0.04045 value
LUMINANCE_FLARE = 0.05

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0
WCAG_AA_NORMAL = 4.5
WCAG_AAA_LARGE = 4.5
WCAG_AAA_NORMAL = 7.0

# ==========================================
# Theme derivation
# ==========================================
GRADIENT_STOPS = 8
GRADIENT_DARK_ANCHOR = "#212121"
GRADIENT_LIGHT_ANCHOR = "#FFFFFF"
GRADIENT_STEP = 100                # --gradient-100, --gradient-200, ...
DARK_TRANSPARENT_ALPHA = 0.98
CONTRAST_BLACK_RGB = (0, 0, 0)
CONTRAST_WHITE_RGB = (255, 255, 255)

# ==========================================
# Surface binding
# ==========================================
TRANSITION_DIRECTIVE = "transition: background-color 0.5s cubic-bezier(0.4, 0, 0.2, 1);"
DARK_CLASS = "dark"
