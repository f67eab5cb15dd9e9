"""Built-in framework descriptors."""

from frontend_components.catalog.models import Framework, LayoutKind

FRAMEWORKS: dict[str, Framework] = {
    framework.id: framework
    for framework in (
        Framework(
            id="hyperui",
            name="HyperUI (HTML)",
            ext=".html",
            deps="None — pure Tailwind CSS classes (some need @tailwindcss/forms)",
            layout=LayoutKind.NESTED,
        ),
        Framework(
            id="headlessui-react",
            name="HeadlessUI React (TSX)",
            ext=".tsx",
            deps="npm install @headlessui/react",
            layout=LayoutKind.COMPONENT_DIR,
        ),
        Framework(
            id="headlessui-vue",
            name="HeadlessUI Vue (SFC)",
            ext=".vue",
            deps="npm install @headlessui/vue",
            layout=LayoutKind.COMPONENT_DIR,
        ),
        Framework(
            id="daisyui",
            name="DaisyUI (CSS Framework)",
            ext=".md",
            deps="npm install daisyui",
            layout=LayoutKind.FLAT,
        ),
        Framework(
            id="flyonui",
            name="FlyonUI (CSS Framework)",
            ext=".css",
            deps="npm install flyonui",
            layout=LayoutKind.SPLIT,
            script_ext=".ts",
        ),
    )
}

FRAMEWORK_IDS: tuple[str, ...] = tuple(FRAMEWORKS)


def get_framework(framework_id: str) -> Framework | None:
    """Look up a built-in framework descriptor.

    Args:
        framework_id: Framework identifier.

    Returns:
        The descriptor, or None if the id is not one of the built-ins.
    """
    return FRAMEWORKS.get(framework_id)
