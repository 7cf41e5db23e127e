from __future__ import annotations
import argparse, dataclasses, json, sys
from . import FileIndex, RankType
from .errors import UnknownFileError


def _print_report(rep) -> None:
    tag = "" if rep.known else "  (not in corpus)"
    print(f"word: {rep.word}{tag}")
    print(f"average: {rep.average}  min: {rep.min}  max: {rep.max}")
    print("File                                 Count  Rank")
    for name in rep.ranks:
        print(f"{name:<36} {rep.counts.get(name, 0):<6} {rep.ranks[name]}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word rank CLI (FileIndex-backed)")
    p.add_argument("root", help="Folder whose files make up the corpus")
    p.add_argument("--count", nargs=2, metavar=("FILE", "WORD"), help="Occurrences of WORD in FILE")
    p.add_argument("--rank", nargs=2, metavar=("FILE", "WORD"), help="Rank of WORD in FILE")
    p.add_argument("--average", metavar="WORD", help="Average rank of WORD across files")
    p.add_argument("--below", type=int, metavar="K", help="List words whose rank is below K")
    p.add_argument("--kind", choices=[t.value for t in RankType], default=RankType.AVERAGE.value,
                   help="Aggregate used by --below")
    p.add_argument("--report", metavar="WORD", help="Per-file counts and ranks of WORD")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    idx = FileIndex()
    idx.index_directory(args.root, verbose=args.verbose)

    out: dict = {}
    try:
        if args.count:
            out["count"] = idx.count_in_file(*args.count)
        if args.rank:
            out["rank"] = idx.rank_in_file(*args.rank)
    except UnknownFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if (args.average or args.report) and not idx.filenames():
        print("error: no readable files were indexed", file=sys.stderr)
        return 3
    if args.average:
        out["average"] = idx.average_rank(args.average)
    if args.below is not None:
        out["words"] = idx.words_with_rank_below(args.below, args.kind)
    if args.report:
        out["report"] = dataclasses.asdict(idx.report(args.report))

    if args.json:
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    if not out:
        print(f"Indexed {len(idx.filenames())} files, {len(idx.vocabulary())} distinct words.")
        if idx.skipped:
            print(f"Skipped (unreadable): {', '.join(idx.skipped)}")
        return 0
    for key in ("count", "rank", "average"):
        if key in out:
            print(f"{key}: {out[key]}")
    if "words" in out:
        if not out["words"]:
            print("(no words)")
        for w in out["words"]:
            print(w)
    if args.report:
        _print_report(idx.report(args.report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
