#!/usr/bin/env python3
"""
Random fuzzer for the markup formatter.
Generates malformed markup, checks that formatting never crashes, and reports
outputs that change when formatted a second time.
"""

import argparse
import random
import string
import sys
import time
import traceback

from markupfmt import Configuration, FormatError, format

TAGS = [
    "div", "span", "p", "a", "img", "table", "tr", "td", "ul", "li", "input", "br",
    "hr", "meta", "link", "template", "slot", "section", "button", "textarea",
    "MyComponent", "RouterLink", "x-card", "Foo.Bar",
]

VOID_TAGS = ["area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"]

ATTRIBUTES = [
    "id", "class", "href", "type", "disabled", "required", ":prop", "@click", "v-if",
    "#default", "[value]", "(change)", "*ngIf", "data-x", "aria-label",
]

SPECIAL_CHARS = [
    "\x00", "\x7f", "\x85", "\u00a0", "\u2028", "\ufeff", "\ufdd0", "\uffff", "\U0001fffe",
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_words(min_words=1, max_words=30):
    return " ".join(random_string(1, 12) for _ in range(random.randint(min_words, max_words)))


def random_whitespace():
    ws = [" ", "\t", "\n", "\r", "\x0c", ""]
    return "".join(random.choices(ws, k=random.randint(0, 5)))


def fuzz_tag_name():
    strategies = [
        lambda: random.choice(TAGS),
        lambda: random.choice(TAGS).upper(),
        lambda: random.choice(VOID_TAGS).upper(),
        lambda: random_string(1, 10),
        lambda: "",
        lambda: random.choice(TAGS) + random.choice(SPECIAL_CHARS),
    ]
    return random.choice(strategies)()


def fuzz_attribute():
    name = random.choice([
        lambda: random.choice(ATTRIBUTES),
        lambda: random_string(1, 15),
        lambda: random.choice(SPECIAL_CHARS),
        lambda: "=",
        lambda: "<",
    ])()
    value = random.choice([
        lambda: random_string(0, 30),
        lambda: random_words(1, 5),
        lambda: "\n" * random.randint(1, 3) + random_string(),
        lambda: "x" * random.randint(60, 200),
    ])()
    quote_start, quote_end = random.choice([
        ('="', '"'),
        ("='", "'"),
        ("=", ""),
        (" = ", ""),
        ("", ""),
        ('="', ""),
        ("==", ""),
    ])
    return f"{name}{quote_start}{value}{quote_end}"


def fuzz_open_tag():
    tag = fuzz_tag_name()
    attrs = " ".join(fuzz_attribute() for _ in range(random.randint(0, 6)))
    closing = random.choice([">", "/>", " >", "/ >", "", ">>"])
    return f"<{tag}{random_whitespace()}{attrs}{random_whitespace()}{closing}"


def fuzz_close_tag():
    tag = fuzz_tag_name()
    return random.choice([
        f"</{tag}>",
        f"</ {tag}>",
        f"</{tag}{random_whitespace()}>",
        f"</{tag}",
        f"</{tag}/>",
    ])


def fuzz_comment():
    content = random.choice([random_string(0, 40), random_words(), "\n" + random_words() + "\n"])
    return random.choice([
        f"<!--{content}-->",
        f"<!-- {content} -->",
        f"<!--\n  {content}\n-->",
        f"<!--{content}",
        "<!---->",
        "<!-->",
        f"<!--{content}--!>",
    ])


def fuzz_doctype():
    return random.choice([
        "<!DOCTYPE html>",
        "<!doctype HTML>",
        "<!DOCTYPE html SYSTEM \"about:legacy-compat\">",
        "<!DOCTYPE html SYSTEM 'about:legacy-compat'>",
        "<!DOCTYPE html >",
        "<!DOCTYPE>",
        "<!DOCTYPEhtml>",
        "<!DOCTYPE html PUBLIC \"\">",
    ])


def fuzz_text():
    strategies = [
        lambda: random_words(),
        lambda: "<" + random_string(1, 5),
        lambda: random_string() + " < " + random_string(),
        lambda: random_string() + ">" + random_string(),
        lambda: "".join(random.choices(SPECIAL_CHARS, k=random.randint(1, 5))),
        lambda: "\r\n" * random.randint(1, 3),
    ]
    return random.choice(strategies)()


def fuzz_nested_structure(depth=0, max_depth=8):
    if depth >= max_depth or random.random() < 0.3:
        return fuzz_text()
    tag = random.choice(TAGS)
    children = "".join(fuzz_nested_structure(depth + 1, max_depth) for _ in range(random.randint(0, 3)))
    closing_tag = tag if random.random() < 0.9 else tag.swapcase()
    return f"<{tag}>{random_whitespace()}{children}{random_whitespace()}</{closing_tag}>"


def generate_fuzzed_markup():
    parts = []
    if random.random() < 0.3:
        parts.append(fuzz_doctype())
    for _ in range(random.randint(1, 15)):
        generator = random.choices(
            [fuzz_open_tag, fuzz_close_tag, fuzz_comment, fuzz_doctype, fuzz_text, fuzz_nested_structure],
            weights=[20, 8, 8, 2, 15, 20],
        )[0]
        parts.append(generator())
        parts.append(random_whitespace())
    return "".join(parts)


def run_fuzzer(num_tests, seed=None, line_width=80, verbose=False, save_failures=False):
    if seed is not None:
        random.seed(seed)

    config = Configuration(line_width=line_width)
    crashes = []
    unstable = []
    hangs = []

    print(f"Fuzzing markupfmt with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        markup = generate_fuzzed_markup()
        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            once = format(markup, config)
            elapsed = time.perf_counter() - start
            twice = format(once, config)
        except FormatError:
            continue
        except Exception as e:
            crashes.append({"test_num": i, "markup": markup, "error": str(e), "traceback": traceback.format_exc()})
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue

        if elapsed > 5.0:
            hangs.append({"test_num": i, "markup": markup, "time": elapsed})
        if once != twice:
            unstable.append({"test_num": i, "markup": markup, "once": once, "twice": twice})

    elapsed_total = time.time() - start_time

    print(f"\n{'=' * 60}")
    print("FUZZING RESULTS")
    print(f"{'=' * 60}")
    print(f"Total tests:    {num_tests}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Not idempotent: {len(unstable)}")
    print(f"Total time:     {elapsed_total:.2f}s")

    for crash in crashes[:10]:
        print(f"\nTest #{crash['test_num']}:")
        print(f"  Markup: {crash['markup'][:200]!r}...")
        print(f"  Error: {crash['error']}")
    if verbose:
        for case in unstable[:5]:
            print(f"\nTest #{case['test_num']} changes on second pass:")
            print(f"  Markup: {case['markup'][:200]!r}...")

    if save_failures and (crashes or hangs or unstable):
        filename = f"fuzz_failures_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"Markup:\n{crash['markup']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"Markup:\n{hang['markup']}\n\n")
            for case in unstable:
                f.write(f"=== NOT IDEMPOTENT #{case['test_num']} ===\n")
                f.write(f"Markup:\n{case['markup']}\n--- once ---\n{case['once']}--- twice ---\n{case['twice']}\n")
        print(f"\nFailures saved to {filename}")

    return not crashes and not hangs


def main():
    parser = argparse.ArgumentParser(description="Fuzz the markup formatter with malformed input")
    parser.add_argument("--num-tests", "-n", type=int, default=1000, help="Number of test cases (default: 1000)")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--line-width", type=int, default=80)
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--save-failures", action="store_true", help="Save failures to a file")
    parser.add_argument("--sample", type=int, metavar="N", help="Just print N sample documents (no formatting)")
    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i + 1} ===")
            print(generate_fuzzed_markup())
            print()
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        line_width=args.line_width,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
