import pygame

import config


def fit_rect(img_size, box_size, margin: float = config.FIT_MARGIN) -> pygame.Rect:
    """
    Centred rect for an image uniformly scaled into *margin* of the box.
    """
    bw, bh = box_size
    iw, ih = img_size
    scale = min(bw * margin / iw, bh * margin / ih)
    w, h = int(iw * scale), int(ih * scale)
    return pygame.Rect((bw - w) // 2, (bh - h) // 2, w, h)


def render_frame(screen: pygame.Surface, image: pygame.Surface) -> None:
    """
    Scale *image* to fit the screen (with margin) and blit it centred.
    """
    r = fit_rect(image.get_size(), screen.get_size())
    screen.fill(config.BACKGROUND)
    screen.blit(pygame.transform.scale(image, r.size), r.topleft)


def render_loading(screen: pygame.Surface, loaded: int, expected: int) -> None:
    sw, sh = screen.get_size()
    pct  = (100 * loaded) // expected if expected else 0
    font = pygame.font.SysFont("monospace", 16)
    txt  = font.render(f"Loading… {loaded}/{expected} ({pct}%)", True, (40, 40, 40))
    screen.fill(config.BACKGROUND)
    screen.blit(txt, ((sw - txt.get_width()) // 2, (sh - txt.get_height()) // 2))
