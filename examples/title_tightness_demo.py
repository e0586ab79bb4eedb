"""
Demonstration of the Text Tightness Analyzer

This script answers, for a set of recommended article titles:
1. How far is each title from the center title?
2. How dispersed are those distances?
3. Into how many tight groups do they fall?
"""

import logging

from text_tightness import StopWordFilter, TightnessAnalyzer, format_classification


CENTER = "感冒第二天了，嗓子完全沙哑了，怎么办"
TITLES = [
    "感冒咳嗽引起嗓子沙哑",
    "我是感冒引起的嗓子沙哑",
    "感冒咳嗽流鼻涕嗓子沙哑",
    "因感冒引起的嗓子沙哑",
    "感冒引起了嗓子沙哑。完全说不出话来",
    "前几天感冒嗓子有点沙哑",
    "年前感冒引起的嗓子沙哑",
    "我是感冒引起的嗓子沙哑",
    "感冒四天了，嗓子沙哑",
]


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    analyzer = TightnessAnalyzer(stop_word_filter=StopWordFilter(["的", "了", "，", "。"]))
    analyzer.set_center(CENTER).set_list(TITLES)

    print_section("Distances to center")
    print(f"Center: {CENTER}")
    print(f"Distances: {analyzer.get_distances()}")

    print_section("Dispersion")
    value, count = analyzer.get_mode()
    print(f"Most common distance: {value} ({count} titles)")
    print(f"Coefficient of variation: {analyzer.get_dispersion():.4f}")

    print_section("Jenks best partition")
    n, class_ = analyzer.get_best_partition(len(TITLES))
    print(f"Bins: {n}")
    print(format_classification(class_))


if __name__ == "__main__":
    main()
