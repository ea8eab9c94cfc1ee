"""Desktop entry generation for the installed browser.

Produces the freedesktop.org ``.desktop`` file that puts Firefox
Developer Edition in the application menu and registers it for web
content MIME types.
"""

from pathlib import Path

from ffdev_setup.constants import (
    APP_DISPLAY_NAME,
    DESKTOP_CATEGORIES,
    DESKTOP_COMMENT,
    DESKTOP_EXEC_PARAM,
    DESKTOP_FILE_TYPE,
    DESKTOP_MIME_TYPES,
    DESKTOP_SECTION_HEADER,
)


class DesktopEntry:
    """Builds .desktop content for an executable and its icon."""

    def __init__(
        self,
        executable: Path,
        icon: Path,
        name: str = APP_DISPLAY_NAME,
    ) -> None:
        """Initialize desktop entry.

        Args:
            executable: Absolute path of the browser binary
            icon: Absolute path of the icon file
            name: Display name shown in menus

        """
        self.executable = executable
        self.icon = icon
        self.name = name

    def generate_desktop_content(
        self,
        comment: str = DESKTOP_COMMENT,
        categories: tuple[str, ...] = DESKTOP_CATEGORIES,
        mime_types: tuple[str, ...] = DESKTOP_MIME_TYPES,
        startup_notify: bool = True,
        terminal: bool = False,
    ) -> str:
        """Generate desktop entry file content.

        Args:
            comment: Application description
            categories: Application menu categories
            mime_types: MIME types the browser handles
            startup_notify: Whether to show startup notification
            terminal: Whether the app runs in a terminal

        Returns:
            Desktop file content as string

        """
        content_lines = [
            DESKTOP_SECTION_HEADER,
            f"Name={self.name}",
            f"Exec={self.executable} {DESKTOP_EXEC_PARAM}",
            f"Terminal={str(terminal).lower()}",
            f"Icon={self.icon}",
            f"Type={DESKTOP_FILE_TYPE}",
            f"Categories={';'.join(categories)};",
            f"StartupNotify={str(startup_notify).lower()}",
            f"Comment={comment}",
        ]

        if mime_types:
            content_lines.append(f"MimeType={';'.join(mime_types)};")

        # Add newline at end
        content_lines.append("")

        return "\n".join(content_lines)
