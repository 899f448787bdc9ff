import unittest

from launcher.errors import UnknownSchemeError
from launcher.schemas import Candidate
from launcher.searcher import best_match
from launcher.searcher.phonetic import contains_cjk, expand, matches_pinyin
from launcher.utils.shuangpin import (
    SHUANGPIN_SCHEMES,
    available_schemes,
    register_scheme,
    split_syllable,
    to_shuangpin,
)

BOTH = ("xiaohe", "ziranma")


class TestExpand(unittest.TestCase):

    def test_full_reading_initials_and_shuangpin(self):
        variants = expand("微信", BOTH)
        self.assertIn("weixin", variants)   # full reading
        self.assertIn("wx", variants)       # initials
        self.assertIn("wwxb", variants)     # xiaohe
        self.assertIn("wzxn", variants)     # ziranma
        self.assertEqual(len(variants), 4)

    def test_duplicates_collapse(self):
        # zh+ong is "vs" in both schemes
        self.assertEqual(expand("中", BOTH), {"zhong", "z", "vs"})

    def test_non_cjk_returns_lowercase(self):
        self.assertEqual(expand("Steam"), {"steam"})

    def test_empty_input(self):
        self.assertEqual(expand(""), set())

    def test_embedded_latin_is_kept_in_place(self):
        variants = expand("QQ音乐", ("xiaohe",))
        self.assertIn("qqyinyue", variants)
        self.assertIn("qqyy", variants)
        self.assertIn("qqybyt", variants)

    def test_latin_after_cjk(self):
        variants = expand("微信PC", ("xiaohe",))
        self.assertIn("weixinpc", variants)
        self.assertIn("wxpc", variants)

    def test_variants_are_lowercase_ascii(self):
        for variant in expand("网易云音乐", BOTH):
            self.assertTrue(variant.isascii())
            self.assertEqual(variant, variant.lower())

    def test_default_schemes_come_from_settings(self):
        self.assertIn("wwxb", expand("微信"))

    def test_every_variant_matches_its_source(self):
        for label in ("微信", "测试", "中国", "音乐", "QQ音乐", "网易云音乐", "钉钉"):
            candidate = Candidate(key=label, name=label)
            for variant in expand(label, BOTH):
                with self.subTest(label=label, variant=variant):
                    self.assertIsNotNone(best_match(candidate, variant, schemes=BOTH))


class TestContainsCjk(unittest.TestCase):

    def test_detection(self):
        self.assertTrue(contains_cjk("QQ音乐"))
        self.assertFalse(contains_cjk("Visual Studio Code"))
        self.assertFalse(contains_cjk(""))


class TestMatchesPinyin(unittest.TestCase):

    def test_partial_reading(self):
        self.assertTrue(matches_pinyin("微信", "weix"))
        self.assertTrue(matches_pinyin("微信", "WX"))

    def test_no_match(self):
        self.assertFalse(matches_pinyin("微信", "abc"))


class TestShuangpin(unittest.TestCase):

    def test_split_syllable(self):
        self.assertEqual(split_syllable("zhuang"), ("zh", "uang"))
        self.assertEqual(split_syllable("xin"), ("x", "in"))
        self.assertEqual(split_syllable("ang"), ("", "ang"))

    def test_xiaohe(self):
        self.assertEqual(to_shuangpin("shuang", "xiaohe"), "ul")
        self.assertEqual(to_shuangpin("chi", "xiaohe"), "ii")
        self.assertEqual(to_shuangpin("lv", "xiaohe"), "lv")
        self.assertEqual(to_shuangpin("xiao", "xiaohe"), "xn")

    def test_ziranma(self):
        self.assertEqual(to_shuangpin("shuang", "ziranma"), "ud")
        self.assertEqual(to_shuangpin("xiao", "ziranma"), "xc")
        self.assertEqual(to_shuangpin("ying", "ziranma"), "yy")

    def test_zero_initial(self):
        self.assertEqual(to_shuangpin("a"), "aa")
        self.assertEqual(to_shuangpin("er"), "er")
        self.assertEqual(to_shuangpin("ang"), "ah")
        self.assertEqual(to_shuangpin("eng"), "eg")

    def test_vowelless_syllable_falls_back(self):
        self.assertEqual(to_shuangpin("n"), "nn")
        self.assertEqual(to_shuangpin("ng"), "ng")

    def test_every_code_is_two_keys(self):
        for syllable in ("zhong", "guo", "ren", "min", "e", "ou", "jue", "qiong"):
            for scheme in BOTH:
                self.assertEqual(len(to_shuangpin(syllable, scheme)), 2)

    def test_unknown_scheme(self):
        with self.assertRaises(UnknownSchemeError):
            to_shuangpin("xin", "nope")
        with self.assertRaises(KeyError):
            to_shuangpin("xin", "nope")

    def test_register_scheme(self):
        self.addCleanup(SHUANGPIN_SCHEMES.pop, "custom", None)
        register_scheme("custom", finals={"in": "q"})
        self.assertIn("custom", available_schemes())
        self.assertEqual(to_shuangpin("xin", "custom"), "xq")
        self.assertEqual(to_shuangpin("win", "custom"), "wq")

    def test_reregistered_scheme_changes_expansion(self):
        self.addCleanup(SHUANGPIN_SCHEMES.pop, "custom", None)
        register_scheme("custom", finals={"ei": "w", "in": "b"})
        self.assertIn("wwxb", expand("微信", schemes=("custom",)))

        register_scheme("custom", finals={"ei": "q", "in": "q"})
        variants = expand("微信", schemes=("custom",))
        self.assertIn("wqxq", variants)
        self.assertNotIn("wwxb", variants)


if __name__ == "__main__":
    unittest.main()
