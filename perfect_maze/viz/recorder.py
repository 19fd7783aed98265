import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)


def save_snapshot(surface: pygame.Surface, path: str) -> str:
    """Writes the full frame to an image file (PNG by extension)."""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    pygame.image.save(surface, path)
    logger.info(f"Snapshot saved: {path}")
    return path


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    """pygame surface -> (height, width, 3) BGR array for OpenCV."""
    view = pygame.surfarray.array3d(surface)
    # view is (width, height, 3) RGB
    frame = np.transpose(view, (1, 0, 2))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"maze_gen_{ts}.mp4"

            if os.path.exists("recordings"):
                self.output_file = os.path.join("recordings", fname)
            else:
                self.output_file = fname

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        # Initialize writer on first frame
        if self.writer is None:
            self.frame_size = surface.get_size()
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")

        self.writer.write(surface_to_frame(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
