import os
import shutil
import tempfile
import unittest

from pathlen_stats.config import LoadConfig
from pathlen_stats.errors import MalformedRecordError
from pathlen_stats.graph import iter_edge_records, load_graph, load_graph_from_lines

HEADER = [
    "# Directed graph (each unordered pair of nodes is saved once): Amazon0302.txt\n",
    "# Amazon product co-purchaisng network from March 02 2003\n",
    "# Nodes: 4 Edges: 4\n",
    "# FromNodeId\tToNodeId\n",
]


class TestEdgeRecords(unittest.TestCase):
    def test_skips_header_lines(self):
        lines = HEADER + ["0\t1\n", "0\t2\n"]
        self.assertEqual(list(iter_edge_records(lines)), [(0, 1), (0, 2)])

    def test_header_is_skipped_even_if_it_looks_like_data(self):
        lines = ["7 8\n", "0 1\n"]
        pairs = list(iter_edge_records(lines, LoadConfig(header_lines=1)))
        self.assertEqual(pairs, [(0, 1)])

    def test_mixed_whitespace_and_blank_lines(self):
        lines = ["1   2\n", "\n", "  3\t4  \n", "# trailing comment\n"]
        pairs = list(iter_edge_records(lines, LoadConfig(header_lines=0)))
        self.assertEqual(pairs, [(1, 2), (3, 4)])

    def test_non_numeric_field_fails_with_line_number(self):
        lines = HEADER + ["0\t1\n", "0\tx\n"]
        with self.assertRaises(MalformedRecordError) as cm:
            list(iter_edge_records(lines))
        self.assertEqual(cm.exception.line_no, 6)
        self.assertIn("not an unsigned integer", str(cm.exception))

    def test_wrong_field_count_fails(self):
        for bad in ["5\n", "1 2 3\n"]:
            with self.assertRaises(MalformedRecordError):
                list(iter_edge_records([bad], LoadConfig(header_lines=0)))

    def test_negative_id_fails(self):
        with self.assertRaises(MalformedRecordError):
            list(iter_edge_records(["-1 2\n"], LoadConfig(header_lines=0)))

    def test_only_plain_ascii_digits_are_node_ids(self):
        for bad in ["1_0\t2\n", "\u0663 4\n", "+3 4\n", "3 \uff14\n"]:
            with self.assertRaises(MalformedRecordError):
                list(iter_edge_records([bad], LoadConfig(header_lines=0)))

    def test_invalid_utf8_line_fails_with_line_number(self):
        lines = [b"0\t1\n", b"\xff\xfe\t2\n"]
        with self.assertRaises(MalformedRecordError) as cm:
            list(iter_edge_records(lines, LoadConfig(header_lines=0)))
        self.assertEqual(cm.exception.line_no, 2)
        self.assertIn("invalid UTF-8", str(cm.exception))

    def test_bytes_lines_are_decoded(self):
        pairs = list(iter_edge_records([b"# hdr\n", b"4\t5\r\n"], LoadConfig(header_lines=1)))
        self.assertEqual(pairs, [(4, 5)])

    def test_negative_header_lines_rejected(self):
        with self.assertRaises(ValueError):
            list(iter_edge_records(["0 1\n"], LoadConfig(header_lines=-1)))

    def test_load_from_lines_aborts_on_bad_record(self):
        with self.assertRaises(MalformedRecordError):
            load_graph_from_lines(["0 1\n", "oops\n"], LoadConfig(header_lines=0))


class TestLoadGraphFile(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "edges.txt")
        with open(self.path, "w", encoding="utf-8") as f:
            f.writelines(HEADER)
            f.write("0\t1\n0\t2\n1\t3\n2\t3\n")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_load_graph(self):
        g = load_graph(self.path)
        self.assertEqual(g.edge_count(), 4)
        self.assertEqual(g.node_count(), 3)
        self.assertEqual(list(g.neighbors(0)), [1, 2])

    def test_invalid_utf8_file(self):
        bad = os.path.join(self.test_dir, "bad.txt")
        with open(bad, "wb") as f:
            f.write(b"0\t1\n\xff\xfe\t2\n")
        with self.assertRaises(MalformedRecordError) as cm:
            load_graph(bad, LoadConfig(header_lines=0))
        self.assertEqual(cm.exception.line_no, 2)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_graph(os.path.join(self.test_dir, "nope.txt"))


if __name__ == "__main__":
    unittest.main()
