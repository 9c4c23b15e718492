import argparse
import logging
import math
import pygame

from .controller import InteractionController, PointerEvent, KeyEvent, ResizeEvent
from .ring_params import CANVAS_WIDTH, CANVAS_HEIGHT
from .state import SailingState, Ring, WIND, BOAT
from .wind import Vector2D, rad_to_deg, wrap_deg

logger = logging.getLogger(__name__)


# -----------------------------
# Pygame viz
# -----------------------------

BG = (230, 243, 255)
INK = (40, 50, 70)
GREY = (150, 160, 175)
GREEN = (40, 160, 60)
WHITE = (255, 255, 255)

KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_ESCAPE: "escape",
}


def draw_arrow(surf, x, y, ang_deg, length, color, width=2):
    th = math.radians(ang_deg)
    x2 = x + length * math.cos(th)
    y2 = y + length * math.sin(th)
    pygame.draw.line(surf, color, (x, y), (x2, y2), width)
    # head
    h = 10
    left = (x2 + -h * math.cos(th) - h * math.sin(th), y2 + -h * math.sin(th) + h * math.cos(th))
    right = (x2 + -h * math.cos(th) + h * math.sin(th), y2 + -h * math.sin(th) - h * math.cos(th))
    pygame.draw.polygon(surf, color, [(x2, y2), left, right])


def draw_compass(surf, font, state: SailingState):
    cx, cy = state.canvas.center_x, state.canvas.center_y
    r = state.wind_ring.max_radius + 25
    # screen y points down, so north is at -90°
    for label, ang_deg in (("N", -90), ("E", 0), ("S", 90), ("W", 180)):
        th = math.radians(ang_deg)
        txt = font.render(label, True, GREY)
        surf.blit(txt, txt.get_rect(center=(cx + r * math.cos(th), cy + r * math.sin(th))))


def draw_ring(surf, font, state: SailingState, ring_id: str, ring: Ring, speed: float):
    color = state.params[ring_id].color
    center = (int(state.canvas.center_x), int(state.canvas.center_y))
    selected = state.selected_ring == ring_id
    pygame.draw.circle(surf, color, center, int(ring.radius), 3 if selected else 1)

    for handle in state.ring_handle_positions(ring):
        pygame.draw.circle(surf, color, (int(handle.x), int(handle.y)), 8)
        pygame.draw.circle(surf, WHITE, (int(handle.x), int(handle.y)), 8, 2)

    txt = font.render(f"{speed:4.1f} kts", True, color)
    surf.blit(txt, txt.get_rect(center=(center[0], center[1] - ring.radius - 14)))


def draw(screen, font, state: SailingState):
    screen.fill(BG)
    draw_compass(screen, font, state)

    draw_ring(screen, font, state, WIND, state.wind_ring, state.wind_speed)
    draw_ring(screen, font, state, BOAT, state.boat_ring, state.boat_speed)

    cx, cy = state.canvas.center_x, state.canvas.center_y
    # Primary spoke of each ring is its vector
    draw_arrow(screen, cx, cy, rad_to_deg(state.wind_ring.angle), state.wind_ring.radius,
               state.params[WIND].color, 3)
    draw_arrow(screen, cx, cy, rad_to_deg(state.boat_ring.angle), state.boat_ring.radius,
               state.params[BOAT].color, 3)

    # Apparent wind on the wind ring's knot scale
    px_per_knot = state.wind_ring.max_radius / max(1e-6, state.wind_ring.speed_cap)
    draw_arrow(screen, cx, cy, rad_to_deg(state.apparent_wind.angle),
               state.apparent_wind.speed * px_per_knot, GREEN, 3)
    pygame.draw.circle(screen, INK, (int(cx), int(cy)), 4)

    relative = wrap_deg(rad_to_deg(state.apparent_wind.angle - state.boat_ring.angle))
    lines = [
        f"True wind: {state.wind_angle_degrees:3d}°  {state.wind_speed:4.1f} kts",
        f"Boat:      {state.boat_heading_degrees:3d}°  {state.boat_speed:4.1f} kts",
        f"Apparent:  {state.apparent_wind_angle_degrees:3d}°  {state.apparent_wind.speed:4.1f} kts"
        f"   ({relative:+6.1f}° off the bow)",
        f"Selected: {state.selected_ring or '-'}",
        "Controls — drag a ring  |  ←/→: rotate  |  ↑/↓: speed  |  ESC: deselect  |  Q: quit",
    ]
    for i, txt in enumerate(lines):
        surf = font.render(txt, True, INK)
        screen.blit(surf, (20, state.canvas.height - 20 * (len(lines) - i) - 6))


def translate(e):
    """pygame event -> controller event, or None when the core does not care."""
    if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        return PointerEvent("down", Vector2D(*e.pos))
    if e.type == pygame.MOUSEMOTION:
        return PointerEvent("move", Vector2D(*e.pos), buttons_down=bool(e.buttons[0]))
    if e.type == pygame.MOUSEBUTTONUP and e.button == 1:
        return PointerEvent("up", Vector2D(*e.pos))
    if e.type == pygame.WINDOWFOCUSLOST:
        return PointerEvent("cancel")
    if e.type == pygame.KEYDOWN and e.key in KEY_NAMES:
        return KeyEvent(KEY_NAMES[e.key])
    if e.type == pygame.VIDEORESIZE:
        return ResizeEvent(e.w, e.h)
    return None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive apparent wind diagram")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Apparent wind — true wind minus boat velocity")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 16)

    state = SailingState()
    controller = InteractionController(state)
    controller.resize(args.width, args.height)
    logger.info("Started at %dx%d, %d fps", args.width, args.height, args.fps)

    while True:
        clock.tick(args.fps)
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_q):
                pygame.quit()
                return
            event = translate(e)
            if event is not None:
                controller.handle(event)

        # ----- Render (read-only)
        draw(screen, font, state)
        pygame.display.flip()


if __name__ == "__main__":
    main()
