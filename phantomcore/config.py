"""Graphics configuration, the runtime-module interface and the base application."""

from __future__ import annotations

import abc
import sys
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class GfxConfiguration:
    """Colour, depth, sampling and window settings for the renderer."""

    red_bits: int = 8
    green_bits: int = 8
    blue_bits: int = 8
    alpha_bits: int = 8
    depth_bits: int = 24
    stencil_bits: int = 0
    msaa_samples: int = 0
    screen_width: int = 1920
    screen_height: int = 1080
    app_name: str = "PhantomEngine"
    screen_origin_width: int = field(init=False)
    screen_origin_height: int = field(init=False)

    MAX_IN_FLIGHT_FRAME_COUNT: ClassVar[int] = 1
    MAX_SCENE_OBJECT_COUNT: ClassVar[int] = 2048
    MAX_TEXTURE_COUNT: ClassVar[int] = 2048

    def __post_init__(self) -> None:
        self.screen_origin_width = self.screen_width
        self.screen_origin_height = self.screen_height

    def __str__(self) -> str:
        return (
            f"App Name:{self.app_name}\n"
            f"GfxConfiguration:"
            f" R:{self.red_bits}"
            f" G:{self.green_bits}"
            f" B:{self.blue_bits}"
            f" A:{self.alpha_bits}"
            f" D:{self.depth_bits}"
            f" S:{self.stencil_bits}"
            f" M:{self.msaa_samples}"
            f" W:{self.screen_width}"
            f" H:{self.screen_height}\n"
        )


class RuntimeModule(abc.ABC):
    """A module driven by the main loop; ``init`` raises on failure."""

    @abc.abstractmethod
    def init(self) -> None:
        """Prepare the module for use."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Release what the module holds."""

    @abc.abstractmethod
    def tick(self) -> None:
        """Run one cycle of the main loop."""


class BaseApplication(RuntimeModule):
    """An application with a configuration and a quit flag; windows come from subclasses."""

    def __init__(self, config: GfxConfiguration) -> None:
        self.config = config
        self._quit = False
        self.frame_count = 0

    def init(self) -> None:
        """Print the configuration to standard output."""
        sys.stdout.write(str(self.config))

    def shutdown(self) -> None:
        """Ask the main loop to stop."""
        self._quit = True

    def tick(self) -> None:
        """Count one cycle of the main loop."""
        self.frame_count += 1

    def is_quit(self) -> bool:
        """True once the application has been asked to stop."""
        return self._quit

    @abc.abstractmethod
    def create_main_window(self) -> None:
        """Create the application's main window."""