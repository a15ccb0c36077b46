import argparse

import pandas as pd

import prioheap


def main(n_warmup: int, n_step: int):
    sizes = [1_000, 10_000, 100_000]
    methods = ["greater", "less", "custom"]

    rows = []
    for method in methods:
        for n_items in sizes:
            mean, std = prioheap.benchmark(n_items, n_warmup=n_warmup, n_step=n_step, method=method)
            rows.append({"method": method, "items": n_items, "mean": mean, "std": std, "per_item": mean / n_items})
    df = pd.DataFrame(rows)
    print(df.to_markdown(index=False))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--warmup", type=int, default=1)
    parser.add_argument("--step", type=int, default=5)
    args = parser.parse_args()
    main(args.warmup, args.step)
