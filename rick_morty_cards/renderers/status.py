"""Status glyphs shown in the corner of each card."""

from dataclasses import dataclass
from typing import Optional

from ..constants.config import STATUS_ALIVE, STATUS_DEAD, STATUS_UNKNOWN


@dataclass(frozen=True)
class StatusIndicator:
    status: str
    color_class: str
    symbol: str
    view_box: str
    # Complete <path/> elements drawn inside the svg
    paths: tuple[str, ...]

    @property
    def svg(self) -> str:
        return (
            f'<svg class="{self.color_class} group-hover:scale-110 transition-transform duration-300 ease-in-out" '
            f'xmlns="http://www.w3.org/2000/svg" width="32" height="32" viewBox="{self.view_box}">'
            f'{"".join(self.paths)}</svg>'
        )


STATUS_INDICATORS: dict[str, StatusIndicator] = {
    STATUS_ALIVE: StatusIndicator(
        status=STATUS_ALIVE,
        color_class="text-green-rick",
        symbol="☺",
        view_box="0 0 36 36",
        paths=(
            '<path fill="currentColor" d="M18 2a16 16 0 1 0 16 16A16 16 0 0 0 18 2M8.89 13.89a2 2 0 1 1 2 2a2 2 0 0 1-2-2m9.24 14.32a8.67 8.67 0 0 1-8.26-6h16.51a8.67 8.67 0 0 1-8.25 6m6.93-12.32a2 2 0 1 1 2-2a2 2 0 0 1-2.01 2Z" class="clr-i-solid clr-i-solid-path-1"/>',
            '<path fill="none" d="M0 0h36v36H0z"/>',
        ),
    ),
    STATUS_DEAD: StatusIndicator(
        status=STATUS_DEAD,
        color_class="text-rose-summer",
        symbol="✝",
        view_box="0 0 512 512",
        paths=(
            '<path fill="currentColor" d="M256 19.313c-44.404 0-85.098 25.433-115.248 68.123C110.6 130.126 91.594 189.846 91.594 256c0 66.152 19.005 125.87 49.156 168.563c30.15 42.69 70.845 68.125 115.25 68.125c44.402 0 85.07-25.435 115.22-68.125c30.15-42.69 49.186-102.41 49.186-168.563c0-66.152-19.037-125.87-49.19-168.564c-30.15-42.69-70.812-68.124-115.214-68.124zM204.23 213.88l14.99 9.966l-20.074 30.19l30.192 20.073l-9.965 14.99l-30.19-20.073l-20.074 30.192l-14.99-9.966l20.07-30.192L144 238.99l9.965-14.99l30.19 20.072l20.074-30.19zm103.54 0l20.074 30.192L358.034 224L368 238.99l-30.19 20.072l20.07 30.192l-14.99 9.965l-20.072-30.193l-30.19 20.073l-9.966-14.99l30.192-20.073l-20.073-30.19l14.99-9.966zM256 367c26 0 52.242 8.515 70.363 26.637l-12.726 12.726c-3.28-3.28-7.006-6.198-11.067-8.75c-.06 1.55-.142 3.128-.27 4.737c-.46 5.693-1.33 11.654-3.568 17.257c-2.236 5.603-6.655 11.875-14.228 13.487c-8.496 1.807-15.982-2.58-21.13-7.59c-5.146-5.01-9.12-11.24-12.495-17.422c-4.78-8.754-8.213-17.494-9.83-21.902c-16.58 2.595-31.98 9.477-42.687 20.183l-12.726-12.726C203.757 375.515 230 367 256 367m3.945 18.084c1.67 4.095 3.972 9.312 6.735 14.373c2.885 5.286 6.303 10.28 9.25 13.147c2.8 2.724 4.114 2.98 4.728 2.896c.056-.07.543-.523 1.358-2.564c1.098-2.752 1.965-7.354 2.34-12.032c.333-4.114.343-8.192.257-11.523c-7.827-2.495-16.192-3.952-24.668-4.296z"/>',
        ),
    ),
    STATUS_UNKNOWN: StatusIndicator(
        status=STATUS_UNKNOWN,
        color_class="text-yellow-morty",
        symbol="?",
        view_box="0 0 24 24",
        paths=(
            '<path fill="currentColor" d="M11.07 12.85c.77-1.39 2.25-2.21 3.11-3.44c.91-1.29.4-3.7-2.18-3.7c-1.69 0-2.52 1.28-2.87 2.34L6.54 6.96C7.25 4.83 9.18 3 11.99 3c2.35 0 3.96 1.07 4.78 2.41c.7 1.15 1.11 3.3.03 4.9c-1.2 1.77-2.35 2.31-2.97 3.45c-.25.46-.35.76-.35 2.24h-2.89c-.01-.78-.13-2.05.48-3.15M14 20c0 1.1-.9 2-2 2s-2-.9-2-2s.9-2 2-2s2 .9 2 2"/>',
        ),
    ),
}


def status_indicator(status: str) -> Optional[StatusIndicator]:
    """Indicator for an exact status value, or None for anything else."""
    return STATUS_INDICATORS.get(status)
