"""Basic Chromatheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromatheme import (
    MemorySurface,
    calculate_color,
    calculate_contrast,
    color_convert,
    color_validate,
    generate_css_color,
    generate_random_color,
)


def demonstrate_conversion() -> None:
    # Validate raw input before converting it.
    for model, value in (("hex", "336699"), ("rgb", [256, 0, 0]), ("hsl", [210, 50, 40])):
        print(f"{model} {value!r} valid:", color_validate(model, value))

    colors = color_convert("hex", "336699")
    print("hex 336699 ->", colors.as_dict())


def demonstrate_contrast() -> None:
    levels = calculate_contrast("FFFFFF", [51, 102, 153])
    print(f"white on 336699: ratio {levels.ratio:.3f}", levels.as_dict())


def demonstrate_theme() -> None:
    theme = generate_css_color("rgb", generate_random_color())
    print("contrast:", theme.contrast.result)
    for declaration in theme.css_variable:
        print("  ", declaration)

    # Apply to an in-memory surface instead of a live document.
    surface = MemorySurface()
    calculate_color(surface, "hex", "FFFFFF", animated=True)
    print("surface classes:", surface.classes)


if __name__ == "__main__":
    demonstrate_conversion()
    demonstrate_contrast()
    demonstrate_theme()
