import random
import unittest

from huffcodec.codecs import BuildResult, CodingStatistics, HuffmanCodec
from huffcodec.errors import UnknownSymbolError
from huffcodec.logger import Logger, ErrorLog, MergeProgressStep, CodingProgressStep
from huffcodec.preprocessors import BytePreprocessor
from huffcodec.settings import HuffmanSettings


def walk_tree(root, bits):
    """Decode bits by walking the tree from the root, one symbol per leaf reached."""
    if root is None:
        return []
    if root.is_leaf:
        return [root.symbol] * len(bits)
    symbols = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf:
            symbols.append(node.symbol)
            node = root
    assert node is root, "bits ended inside a code"
    return symbols


def optimal_cost(counts):
    """Weighted path length of an optimal prefix code, by merging a sorted list of weights."""
    weights = sorted(counts)
    cost = 0
    while len(weights) > 1:
        merged = weights[0] + weights[1]
        cost += merged
        weights = sorted(weights[2:] + [merged])
    return cost


class TestHuffmanCodecBuild(unittest.TestCase):
    def setUp(self):
        self.codec = HuffmanCodec()

    def test_empty_input(self):
        tree, frequencies, codes = self.codec.build("")
        self.assertIsNone(tree)
        self.assertEqual(len(frequencies), 0)
        self.assertEqual(len(codes), 0)
        self.assertEqual(self.codec.encode(""), "")

    def test_single_distinct_symbol(self):
        result = self.codec.build("aaaa")
        self.assertTrue(result.tree.is_leaf)
        self.assertEqual(result.codes.to_dict(), {'a': "0"})
        self.assertEqual(self.codec.encode("aaaa"), "0000")

    def test_two_symbols(self):
        result = self.codec.build("aaab")
        self.assertFalse(result.tree.is_leaf)
        self.assertTrue(result.tree.left.is_leaf)
        self.assertTrue(result.tree.right.is_leaf)
        self.assertEqual(result.codes.to_dict(), {'b': "0", 'a': "1"})
        encoded = self.codec.encode("aaab")
        self.assertEqual(encoded, "1110")
        self.assertEqual(len(encoded), 4)

    def test_abracadabra(self):
        result = self.codec.build("abracadabra")
        self.assertEqual(result.frequencies.to_dict(), {'a': 5, 'b': 2, 'r': 2, 'c': 1, 'd': 1})
        encoded = self.codec.encode("abracadabra")
        self.assertEqual(encoded, "01101110100010101101110")
        # 23 bits is the optimum for weights 5, 2, 2, 1, 1
        self.assertEqual(len(encoded), 23)

    def test_build_result_is_a_tuple_like(self):
        result = self.codec.build("abc")
        self.assertIsInstance(result, BuildResult)
        tree, frequencies, codes = result
        self.assertIs(tree, result.tree)
        self.assertIs(frequencies, result.frequencies)
        self.assertIs(codes, result.codes)
        self.assertIs(self.codec.last_result, result)

    def test_display_orderings(self):
        result = self.codec.build("abracadabra")
        self.assertEqual([tuple(e) for e in result.frequencies.sorted_by_count()][0], ('a', 5))
        lengths = [len(code) for _, code in result.codes.sorted_by_length()]
        self.assertEqual(lengths, sorted(lengths))

    def test_idempotent(self):
        text = "this is an example of a huffman tree"
        first = self.codec.build(text).codes
        second = self.codec.build(text).codes
        self.assertEqual(first, second)
        self.assertEqual(HuffmanCodec().build(text).codes, first)

    def test_properties_on_random_inputs(self):
        rng = random.Random(1234)
        for length in (1, 2, 7, 50, 500):
            text = "".join(rng.choice("abcdefgh ") for _ in range(length))
            result = self.codec.build(text)
            self.assertEqual(set(result.codes), set(text))
            if len(result.codes) >= 2:
                self.assertTrue(result.codes.is_prefix_free())
            encoded = self.codec.encode(text)
            self.assertEqual("".join(walk_tree(result.tree, encoded)), text)
            if len(result.codes) >= 2:
                self.assertEqual(len(encoded), optimal_cost([c for _, c in result.frequencies.items()]))
                self.assertEqual(self.codec.statistics().encoded_bits, len(encoded))

    def test_bytes_input(self):
        data = bytes(range(256)) + b"\x00" * 100
        result = self.codec.build(data)
        self.assertEqual(len(result.codes), 256)
        self.assertEqual(result.codes.sorted_by_length()[0].symbol, 0)
        encoded = self.codec.encode(data)
        self.assertEqual(bytes(walk_tree(result.tree, encoded)), data)

    def test_null_character_is_an_ordinary_symbol(self):
        text = "a\0a\0b"
        result = self.codec.build(text)
        self.assertIn("\0", result.codes)
        self.assertEqual("".join(walk_tree(result.tree, self.codec.encode(text))), text)

    def test_invalid_input_type(self):
        logger = Logger()
        logger.display_error = False
        codec = HuffmanCodec(logger=logger)
        with self.assertRaises(ValueError):
            codec.build(12345)
        self.assertIsInstance(logger.logs[-1], ErrorLog)

    def test_explicit_preprocessor(self):
        codec = HuffmanCodec(preprocessor=BytePreprocessor())
        with self.assertRaises(ValueError):
            codec.build("text")
        self.assertEqual(len(codec.build(b"ab").codes), 2)


class TestHuffmanCodecEncode(unittest.TestCase):
    def setUp(self):
        self.codec = HuffmanCodec()

    def test_encode_without_build(self):
        self.assertEqual(self.codec.encode("aaab"), "1110")
        self.assertIsNotNone(self.codec.last_result)

    def test_encode_rebuilds_for_other_text(self):
        first = self.codec.build("aaab")
        self.assertEqual(self.codec.encode("xyz"), "".join(self.codec.last_result.codes[c] for c in "xyz"))
        self.assertIsNot(self.codec.last_result, first)

    def test_encode_reuses_last_build(self):
        result = self.codec.build("banana")
        self.codec.encode("banana")
        self.assertIs(self.codec.last_result, result)

    def test_unknown_symbol(self):
        result = self.codec.build("ab")
        with self.assertRaises(UnknownSymbolError):
            self.codec.encoder.encode("abc", result.codes)


class TestCodingStatistics(unittest.TestCase):
    def test_requires_build(self):
        with self.assertRaises(ValueError):
            HuffmanCodec().statistics()

    def test_abracadabra(self):
        codec = HuffmanCodec()
        codec.build("abracadabra")
        stats = codec.statistics()
        self.assertEqual(stats.symbol_count, 11)
        self.assertEqual(stats.distinct_symbols, 5)
        self.assertEqual(stats.encoded_bits, 23)
        self.assertEqual(stats.fixed_length_bits, 88)
        self.assertAlmostEqual(stats.average_code_length, 23 / 11)
        self.assertAlmostEqual(stats.compression_ratio, 88 / 23)
        self.assertLessEqual(stats.entropy, stats.average_code_length)
        self.assertLess(stats.average_code_length, stats.entropy + 1)
        self.assertAlmostEqual(stats.efficiency, stats.entropy / stats.average_code_length)

    def test_uniform_distribution_is_fully_efficient(self):
        codec = HuffmanCodec()
        codec.build("abcdabcd")
        stats = codec.statistics()
        self.assertAlmostEqual(stats.entropy, 2.0)
        self.assertAlmostEqual(stats.average_code_length, 2.0)
        self.assertAlmostEqual(stats.efficiency, 1.0)

    def test_single_and_empty(self):
        codec = HuffmanCodec()
        codec.build("zzz")
        single = codec.statistics()
        self.assertEqual(single.encoded_bits, 3)
        self.assertEqual(single.entropy, 0.0)
        self.assertEqual(single.efficiency, 1.0)

        codec.build("")
        empty = codec.statistics()
        self.assertEqual(empty.encoded_bits, 0)
        self.assertEqual(empty.compression_ratio, 0.0)
        self.assertEqual(empty.efficiency, 0.0)

    def test_settings_change_fixed_bits(self):
        codec = HuffmanCodec(settings=HuffmanSettings(fixed_symbol_bits=16))
        codec.build("abab")
        self.assertIsInstance(codec.statistics(), CodingStatistics)
        self.assertEqual(codec.statistics().fixed_length_bits, 64)

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            HuffmanSettings(single_symbol_code="")
        with self.assertRaises(ValueError):
            HuffmanSettings(single_symbol_code="2")
        with self.assertRaises(ValueError):
            HuffmanSettings(fixed_symbol_bits=0)


class TestHuffmanCodecProgress(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.logger.record_progress = True
        self.logger.display_progress = False
        self.codec = HuffmanCodec(logger=self.logger)

    def last_message(self, log_type):
        return [log.message for log in self.logger.logs if isinstance(log, log_type)][-1]

    def test_merge_progress_restarts_each_build(self):
        self.codec.build("abracadabra")
        self.codec.build("abracadabra")
        self.codec.encode("abracadabra")
        self.assertEqual(self.last_message(MergeProgressStep), "Merging nodes (4/4)")
        self.assertEqual(self.logger.merge_progress_count, 4)

    def test_coding_progress_restarts_each_encode(self):
        self.codec.encode("abracadabra")
        self.codec.encode("abracadabra")
        self.assertEqual(self.last_message(CodingProgressStep), "Encoding symbols (11/11)")

    def test_other_text_restarts_merge_progress(self):
        self.codec.build("abracadabra")
        self.codec.encode("aaab")
        self.assertEqual(self.last_message(MergeProgressStep), "Merging nodes (1/1)")
        self.assertEqual(self.last_message(CodingProgressStep), "Encoding symbols (4/4)")


if __name__ == '__main__':
    unittest.main()
