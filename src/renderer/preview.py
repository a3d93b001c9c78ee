# renderer/preview.py
import numpy as np
import pygame

def show_image(pixels: np.ndarray, title: str = "Path Tracer", scale: int = 1) -> None:
    """
    Show an 8-bit (height, width, 3) image in a pygame window until it is
    closed or Escape is pressed.
    """
    pixels = np.asarray(pixels, dtype=np.uint8)
    height, width = pixels.shape[0], pixels.shape[1]

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)
        # surfarray is indexed [x, y].
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(pixels.transpose(1, 0, 2)))
        if scale != 1:
            surface = pygame.transform.scale(surface, (width * scale, height * scale))
        screen.blit(surface, (0, 0))
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
        pygame.quit()
