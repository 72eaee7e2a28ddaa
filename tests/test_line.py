import itertools
import unittest

from game.line import slide_line


class TestSlideLine(unittest.TestCase):

    """병합 규칙"""
    def test_three_equal_tiles_merge_leftmost_pair_only(self):
        result = slide_line([2, 2, 2, 0])
        self.assertEqual(result.cells, [4, 2, 0, 0])
        self.assertEqual(result.score_delta, 2)
        self.assertTrue(result.changed)

    def test_four_equal_tiles_make_two_pairs(self):
        result = slide_line([2, 2, 2, 2])
        self.assertEqual(result.cells, [4, 4, 0, 0])
        self.assertEqual(result.score_delta, 4)

    def test_merged_tile_does_not_merge_again(self):
        result = slide_line([2, 2, 4, 0])
        self.assertEqual(result.cells, [4, 4, 0, 0])
        self.assertEqual(result.score_delta, 2)

    def test_merge_across_gaps(self):
        result = slide_line([4, 0, 4, 8])
        self.assertEqual(result.cells, [8, 8, 0, 0])
        self.assertEqual(result.score_delta, 4)

    def test_two_different_pairs(self):
        result = slide_line([4, 4, 8, 8])
        self.assertEqual(result.cells, [8, 16, 0, 0])
        self.assertEqual(result.score_delta, 12)

    """이동과 변경 여부"""
    def test_full_line_without_pairs_is_unchanged(self):
        result = slide_line([2, 4, 8, 16])
        self.assertEqual(result.cells, [2, 4, 8, 16])
        self.assertFalse(result.changed)
        self.assertEqual(result.score_delta, 0)

    def test_empty_line_is_unchanged(self):
        result = slide_line([0, 0, 0, 0])
        self.assertEqual(result.cells, [0, 0, 0, 0])
        self.assertFalse(result.changed)
        self.assertEqual(result.moves, [])

    def test_slide_without_merge_is_a_change(self):
        result = slide_line([0, 0, 0, 2])
        self.assertEqual(result.cells, [2, 0, 0, 0])
        self.assertTrue(result.changed)
        self.assertEqual(result.score_delta, 0)
        self.assertEqual(result.moves, [(3, 0, False)])

    def test_moves_mark_both_merged_tiles(self):
        result = slide_line([2, 2, 2, 0])
        self.assertEqual(result.moves, [(0, 0, True), (1, 0, True), (2, 1, False)])

    def test_other_lengths(self):
        self.assertEqual(slide_line([2, 2]).cells, [4, 0])
        self.assertEqual(slide_line([0, 8, 8, 0, 2, 2]).cells, [16, 4, 0, 0, 0, 0])

    """모든 조합에 대한 성질"""
    def test_properties_for_all_small_lines(self):
        for line in itertools.product([0, 2, 4, 8], repeat=4):
            line = list(line)
            result = slide_line(line)

            # 타일 값의 합은 보존
            self.assertEqual(sum(result.cells), sum(line), line)

            # 빈칸 뒤에 타일이 오지 않음
            tiles = [v for v in result.cells if v]
            self.assertEqual(result.cells[:len(tiles)], tiles, line)

            # 점수는 병합된 쌍의 원래 값의 합
            merged_targets = {target for _, target, merged in result.moves if merged}
            expected = sum(result.cells[t] // 2 for t in merged_targets)
            self.assertEqual(result.score_delta, expected, line)
            merges = sum(1 for v in line if v) - len(tiles)
            self.assertEqual(len(merged_targets), merges, line)

            # 한 칸에 세 개 이상이 모이지 않음
            for target in range(len(line)):
                sources = [s for s, t, _ in result.moves if t == target]
                self.assertLessEqual(len(sources), 2, line)

    def test_second_pass_only_changes_by_merging(self):
        for line in itertools.product([0, 2, 4, 8], repeat=4):
            first = slide_line(list(line))
            second = slide_line(first.cells)
            has_pair = any(a and a == b for a, b in zip(first.cells, first.cells[1:]))
            self.assertEqual(second.changed, has_pair, line)
            if not has_pair:
                self.assertEqual(second.cells, first.cells)
                self.assertEqual(second.score_delta, 0)


if __name__ == '__main__':
    unittest.main()
