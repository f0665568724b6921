#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - Algorithm cycle (side-winder -> binary -> random-walk): G
# - Distance texture toggle: T (hover a cell to pick the source)
# - Step through the generation history: LEFT / RIGHT, END jumps to the final maze
# - 60 Hz fixed loop

import argparse
import pygame
from mazegen.config import DEMO_DEFAULTS, VIEW
from mazegen.distance import compute_distances
from mazegen.grid import Grid
from mazegen.mapgen.generator import ALGORITHMS, generate_grid
from mazegen.render.layout import cell_at, fit
from mazegen.render.surface import draw_maze

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--algorithm", choices=ALGORITHMS, default="side-winder")
    ap.add_argument("--size", type=int, default=VIEW.width, help="Window edge in pixels")
    ap.add_argument("--texture", action="store_true", help="Start with the distance texture on")
    args = ap.parse_args()

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.size, args.size))

    algo = args.algorithm
    show_texture = args.texture

    def load():
        d = DEMO_DEFAULTS[algo]
        history = []
        grid = generate_grid(algo, d.rows, d.columns, d.seed, d.bias, history=history)
        print(f"[viewer] {algo}: {len(history)} carve steps")
        return grid, history

    grid, history = load()
    step = len(history)  # == len(history) means the finished maze
    layout = fit(grid, args.size, args.size, VIEW.padding)
    cache = {}  # (x, y) -> DistanceField, for the finished maze only

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_g:
                    i = ALGORITHMS.index(algo)
                    algo = ALGORITHMS[(i + 1) % len(ALGORITHMS)]
                    grid, history = load()
                    step = len(history)
                    cache.clear()
                elif ev.key == pygame.K_t:
                    show_texture = not show_texture
                elif ev.key == pygame.K_LEFT:
                    step = max(0, step - 1)
                elif ev.key == pygame.K_RIGHT:
                    step = min(len(history), step + 1)
                elif ev.key == pygame.K_END:
                    step = len(history)

        if step == len(history):
            shown = grid
        elif step == 0:
            shown = Grid.create(grid.rows, grid.columns)
        else:
            shown = history[step - 1]

        # Partial mazes are disconnected, so the texture only applies to the final one
        distances = None
        if show_texture and shown is grid:
            hovered = cell_at(grid, layout, pygame.mouse.get_pos())
            if hovered is not None:
                key = (hovered.x, hovered.y)
                if key not in cache:
                    cache[key] = compute_distances(hovered, grid)
                distances = cache[key]

        draw_maze(screen, shown, layout, distances)
        pygame.display.set_caption(
            f"Maze Viewer - {algo}  step {step}/{len(history)}  TEXTURE:{show_texture}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
