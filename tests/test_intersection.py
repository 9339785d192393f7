import unittest

from accept_language import intersection, intersection_ordered, intersection_with_quality, \
    intersection_ordered_with_quality, parse
from tests.config import MOCK_ACCEPT_LANGUAGE, AVAILABLE_LANGUAGES


class IntersectionTest(unittest.TestCase):
    def test_intersections(self):
        self.assertEqual(['en-US', 'zh-Hant', 'de', 'jp'],
                         intersection(MOCK_ACCEPT_LANGUAGE, AVAILABLE_LANGUAGES))

    def test_simple(self):
        self.assertEqual(['en-US', 'en-GB'],
                         intersection('en-US, en-GB;q=0.5', ['en-US', 'de', 'en-GB']))

    def test_no_intersections(self):
        self.assertEqual([], intersection(MOCK_ACCEPT_LANGUAGE, ['fr', 'en-GB']))

    def test_empty_header(self):
        self.assertEqual([], intersection('', AVAILABLE_LANGUAGES))

    def test_keeps_preference_order(self):
        self.assertEqual(['de', 'jp'], intersection(MOCK_ACCEPT_LANGUAGE, ['jp', 'fr', 'de']))

    def test_case_sensitive(self):
        self.assertEqual([], intersection('en-us', ['en-US']))

    def test_accepts_sets(self):
        self.assertEqual(['zh-Hant', 'de'], intersection(MOCK_ACCEPT_LANGUAGE, {'de', 'zh-Hant'}))

    def test_subset_of_parse(self):
        supported = ['jp', 'fr', 'en-US']
        expected = [lang for lang in parse(MOCK_ACCEPT_LANGUAGE) if lang in supported]
        self.assertEqual(expected, intersection(MOCK_ACCEPT_LANGUAGE, supported))


class IntersectionOrderedTest(unittest.TestCase):
    def test_intersections(self):
        self.assertEqual(['en-US', 'zh-Hant', 'de', 'jp'],
                         intersection_ordered(MOCK_ACCEPT_LANGUAGE, AVAILABLE_LANGUAGES))

    def test_simple(self):
        self.assertEqual(['en-US', 'en-GB'],
                         intersection_ordered('en-US, en-GB;q=0.5', ['de', 'en-GB', 'en-US']))

    def test_no_intersections(self):
        self.assertEqual([], intersection_ordered(MOCK_ACCEPT_LANGUAGE, ['en-GB', 'fr']))

    def test_empty_supported_languages(self):
        self.assertEqual([], intersection_ordered(MOCK_ACCEPT_LANGUAGE, []))

    def test_past_the_end(self):
        self.assertEqual([], intersection_ordered('zz', ['aa', 'bb']))

    def test_same_as_unordered_on_sorted_input(self):
        for supported in [
            ['en-US', 'de', 'en-GB'],
            ['zh-Hant', 'jp', 'zh', 'aa'],
            ['fr'],
            [],
            AVAILABLE_LANGUAGES,
        ]:
            for header in [MOCK_ACCEPT_LANGUAGE, 'en-US, en-GB;q=0.5', 'fr;q=0.1,aa,zh', '']:
                self.assertEqual(intersection(header, supported),
                                 intersection_ordered(header, sorted(supported)))


class IntersectionWithQualityTest(unittest.TestCase):
    def test_intersections(self):
        self.assertEqual(
            [('en-US', 1.0), ('zh-Hant', 1.0), ('de', 0.7), ('jp', 0.1)],
            intersection_with_quality(MOCK_ACCEPT_LANGUAGE, AVAILABLE_LANGUAGES))

    def test_keeps_user_quality(self):
        self.assertEqual([('de', 0.7), ('jp', 0.1)],
                         intersection_with_quality(MOCK_ACCEPT_LANGUAGE, ['jp', 'de']))

    def test_no_intersections(self):
        self.assertEqual([], intersection_with_quality(MOCK_ACCEPT_LANGUAGE, ['fr']))

    def test_ordered(self):
        self.assertEqual(
            [('en-US', 1.0), ('zh-Hant', 1.0), ('de', 0.7), ('jp', 0.1)],
            intersection_ordered_with_quality(MOCK_ACCEPT_LANGUAGE, AVAILABLE_LANGUAGES))

    def test_ordered_same_as_unordered(self):
        supported = ['zh-Hant', 'jp', 'en-GB']
        self.assertEqual(intersection_with_quality(MOCK_ACCEPT_LANGUAGE, supported),
                         intersection_ordered_with_quality(MOCK_ACCEPT_LANGUAGE, sorted(supported)))


if __name__ == '__main__':
    unittest.main()
