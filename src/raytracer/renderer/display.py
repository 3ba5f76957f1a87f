# renderer/display.py
import logging

import numpy as np

logger = logging.getLogger(__name__)


def to_surface_array(pixels: np.ndarray) -> np.ndarray:
    """
    Convert an image of shape (height, width, 3) to the (width, height, 3)
    layout pygame.surfarray expects.
    """
    return np.ascontiguousarray(pixels.transpose(1, 0, 2))


def show_image(pixels: np.ndarray, scale: int = 1, caption: str = "spheretrace"):
    """
    Display a finished 8-bit render in a pygame window until it is closed
    or Escape is pressed.
    """
    import pygame

    height, width = pixels.shape[:2]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(caption)

        surf = pygame.surfarray.make_surface(to_surface_array(pixels))
        if scale != 1:
            surf = pygame.transform.scale(surf, (width * scale, height * scale))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        logger.debug("Closing preview window")
        pygame.quit()
