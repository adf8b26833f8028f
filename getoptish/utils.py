def levenshtein(a: str, b: str) -> int:
    if len(a) < len(b):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            curr.append(
                min(
                    prev[j] + 1,
                    curr[j - 1] + 1,
                    prev[j - 1] + (ca != cb),
                )
            )
        prev = curr
    return prev[-1]


def mostSimilar(scored: list[tuple[int, str]], limit: int) -> list[str]:
    # sorted() is stable, ties keep their original order
    ranked = sorted(scored, key=lambda s: s[0])
    return [label for _, label in ranked[:limit]]
