#!/usr/bin/env python3
"""RoboEyes - headless host loop driving the eyes on an in-memory surface."""

import argparse
import logging
import signal
import time

from roboeyes.config import apply_config, load_config
from roboeyes.display.image_surface import ImageSurface
from roboeyes.robo_eyes import RoboEyes

log = logging.getLogger("roboeyes")

# Host poll period; the engine's own frame gate decides when to draw
_TICK_SECS = 0.002


class EyesHost:
    def __init__(self, config_path: str = "config.yaml", output: str | None = None,
                 max_frames: int = 0):
        self.config = load_config(config_path)
        self._output = output
        self._max_frames = max_frames
        self._running = False

    def start(self):
        self._running = True

        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        disp = self.config.display
        surface = ImageSurface(disp.width, disp.height, background=disp.bg_color)
        eyes = RoboEyes()
        eyes.begin(surface, disp.width, disp.height, disp.fps)
        apply_config(eyes, self.config)

        log.info(f"Entering render loop at {disp.fps} FPS target")

        try:
            while self._running:
                eyes.update()
                if self._max_frames and eyes.frame_count >= self._max_frames:
                    break
                time.sleep(_TICK_SECS)
        except KeyboardInterrupt:
            log.info("Interrupted")
        finally:
            self._running = False
            if self._output:
                surface.image.copy().save(self._output)
                log.info(f"Saved last frame to {self._output}")
            log.info(f"Done after {eyes.frame_count} frames")

    def stop(self):
        self._running = False


def main():
    parser = argparse.ArgumentParser(description="RoboEyes")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--output", help="Save the final frame to this PNG file")
    parser.add_argument("--frames", type=int, default=0,
                        help="Stop after this many frames (0 = run until interrupted)")
    args = parser.parse_args()

    host = EyesHost(config_path=args.config, output=args.output, max_frames=args.frames)

    # Handle SIGTERM gracefully (for systemd)
    signal.signal(signal.SIGTERM, lambda *_: host.stop())

    host.start()


if __name__ == "__main__":
    main()
