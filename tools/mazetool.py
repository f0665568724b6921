#!/usr/bin/env python3
import argparse, os
from mazegen.config import DEMO_DEFAULTS
from mazegen.distance import compute_distances
from mazegen.mapgen.generator import ALGORITHMS, generate_grid
from mazegen.render.ascii import render_ascii

def build(args):
    try:
        return generate_grid(args.algorithm, args.rows, args.columns, args.seed, args.bias)
    except ValueError as e:
        raise SystemExit(f"[mazetool] {e}")

def cmd_emit(args):
    text = render_ascii(build(args))
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"[mazetool] Wrote {args.out}")
    else:
        print(text)

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    algos = [args.algorithm] if args.algorithm else ALGORITHMS
    for algo in algos:
        d = DEMO_DEFAULTS[algo]
        seed = d.seed if args.seed is None else args.seed
        bias = d.bias if args.bias is None else args.bias
        try:
            grid = generate_grid(algo, args.rows, args.columns, seed, bias)
        except ValueError as e:
            raise SystemExit(f"[mazetool] {e}")
        path = os.path.join(args.outdir, f"{algo}_{args.rows}x{args.columns}_{seed}.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(render_ascii(grid) + "\n")
    print(f"[mazetool] Wrote golden pack to {args.outdir}")

def cmd_distances(args):
    grid = build(args)
    try:
        field = compute_distances(grid.cell(args.x, args.y), grid)
    except IndexError as e:
        raise SystemExit(f"[mazetool] {e}")
    for row in grid.cells:
        print(" ".join(f"{field.distance(c):3d}" for c in row))
    print(f"[mazetool] max distance {field.max_distance} (at {field.farthest()})")

def add_maze_args(p):
    p.add_argument('--algorithm', choices=ALGORITHMS, default='binary')
    p.add_argument('--rows', type=int, default=10)
    p.add_argument('--columns', type=int, default=10)
    p.add_argument('--seed', type=int, default=42)
    p.add_argument('--bias', type=float, default=None, help='East-vs-north bias (row-scan algorithms)')

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_maze_args(p1)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--rows', type=int, default=3)
    p2.add_argument('--columns', type=int, default=3)
    p2.add_argument('--algorithm', choices=ALGORITHMS, default=None, help='Only this algorithm (default: all)')
    p2.add_argument('--seed', type=int, default=None, help='Override the per-algorithm demo seed')
    p2.add_argument('--bias', type=float, default=None, help='Override the per-algorithm demo bias')
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('distances')
    add_maze_args(p3)
    p3.add_argument('--x', type=int, default=0)
    p3.add_argument('--y', type=int, default=0)
    p3.set_defaults(func=cmd_distances)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
