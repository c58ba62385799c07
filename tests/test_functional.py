from __future__ import annotations

import copy
import pickle
import unittest


def explode(delimiter, text, limit=None):
    if limit is None:
        return text.split(delimiter)
    return text.split(delimiter, limit - 1)


class PlaceholderTests(unittest.TestCase):
    def test_placeholder_is_a_singleton(self) -> None:
        from fnkit import ANY
        from fnkit.functional import _Placeholder

        self.assertIs(_Placeholder(), ANY)
        self.assertIs(copy.copy(ANY), ANY)
        self.assertIs(copy.deepcopy(ANY), ANY)
        self.assertIs(pickle.loads(pickle.dumps(ANY)), ANY)
        self.assertEqual(repr(ANY), "ANY")

    def test_placeholder_differs_from_plain_values(self) -> None:
        from fnkit import ANY

        for value in ("\0*\0", "ANY", None, 0, "", object()):
            with self.subTest(value=value):
                self.assertIsNot(value, ANY)
                self.assertNotEqual(value, ANY)


class FuncApplyTests(unittest.TestCase):
    def test_placeholder_slot_is_filled_by_caller(self) -> None:
        from fnkit import ANY, func_apply

        calls = []

        def record(*args):
            calls.append(args)
            return explode(*args)

        split_two = func_apply(record, ",", ANY, 2)
        self.assertEqual(split_two("a,b,c"), ["a", "b,c"])
        self.assertEqual(calls, [(",", "a,b,c", 2)])

    def test_fixed_positions_keep_their_values(self) -> None:
        from fnkit import ANY, func_apply

        collect = func_apply(lambda *args: args, "w", ANY, "y", ANY)
        self.assertEqual(collect(1, 2), ("w", 1, "y", 2))
        self.assertEqual(collect(1, 2, 3, 4), ("w", 1, "y", 2, 3, 4))
        # Fixed values past the caller's arguments are appended.
        self.assertEqual(collect(), ("w", "y"))

    def test_leading_bound_arguments(self) -> None:
        from fnkit import func_apply

        add = func_apply(lambda a, b, c: a * 100 + b * 10 + c, 1, 2)
        self.assertEqual(add(3), 123)

    def test_trailing_placeholders(self) -> None:
        from fnkit import ANY, func_apply

        collect = func_apply(lambda *args: args, "first", ANY, ANY)
        self.assertEqual(collect("a", "b"), ("first", "a", "b"))
        self.assertEqual(collect("a"), ("first", "a"))

    def test_no_bound_arguments(self) -> None:
        from fnkit import func_apply

        self.assertEqual(func_apply(max)(3, 9, 4), 9)

    def test_keyword_arguments_merge_with_call_time_winning(self) -> None:
        from fnkit import ANY, func_apply

        split = func_apply(str.split, ANY, sep=",")
        self.assertEqual(split("a,b,c"), ["a", "b", "c"])
        self.assertEqual(split("a,b,c", maxsplit=1), ["a", "b,c"])
        self.assertEqual(split("a;b", sep=";"), ["a", "b"])

    def test_bound_arguments_are_frozen(self) -> None:
        from fnkit import ANY, func_apply

        partial = func_apply(lambda *a, **k: (a, k), ANY, 1, key="v")
        self.assertIsInstance(partial.args, tuple)
        self.assertEqual(partial.placeholders, 1)
        with self.assertRaises(TypeError):
            partial.kwargs["key"] = "other"

    def test_repr_names_function_and_arguments(self) -> None:
        from fnkit import ANY, func_apply

        self.assertEqual(repr(func_apply(explode, ",", ANY, 2)), "func_apply(explode, ',', ANY, 2)")

    def test_non_callable_fails_at_construction(self) -> None:
        from fnkit import NotCallableError, func_apply

        for value in ("explode", 42, None, [len]):
            with self.subTest(value=value):
                with self.assertRaises(NotCallableError):
                    func_apply(value, 1)


class FuncMapTests(unittest.TestCase):
    def test_maps_each_element_in_order(self) -> None:
        from fnkit import func_map

        capitalize_all = func_map(str.capitalize)
        names = ["john", "mary", "nick"]
        self.assertEqual(capitalize_all(names), ["John", "Mary", "Nick"])
        self.assertEqual(names, ["john", "mary", "nick"])

    def test_accepts_any_iterable(self) -> None:
        from fnkit import func_map

        double = func_map(lambda x: x * 2)
        self.assertEqual(double((1, 2, 3)), [2, 4, 6])
        self.assertEqual(double(x for x in range(3)), [0, 2, 4])
        self.assertEqual(double([]), [])

    def test_mapping_keeps_keys(self) -> None:
        from fnkit import func_map

        self.assertEqual(func_map(len)({"a": "x", "b": "yy"}), {"a": 1, "b": 2})

    def test_non_callable_fails_at_construction(self) -> None:
        from fnkit import NotCallableError, func_map

        with self.assertRaises(NotCallableError):
            func_map("strtoupper")


class FuncReduceTests(unittest.TestCase):
    def test_unseeded_fold_starts_with_first_element(self) -> None:
        from fnkit import func_reduce

        calls = []

        def concat(a, b):
            calls.append((a, b))
            return a + b

        self.assertEqual(func_reduce(concat)(["a", "b", "c", "d", "e"]), "abcde")
        self.assertEqual(calls[0], ("a", "b"))
        self.assertEqual(len(calls), 4)

    def test_fold_is_left_associative(self) -> None:
        from fnkit import func_reduce

        self.assertEqual(func_reduce(lambda a, b: a - b)([10, 3, 2]), 5)
        self.assertEqual(func_reduce(lambda a, b: f"({a}{b})", "")(["a", "b"]), "((a)b)")

    def test_default_seed_and_call_seed_override(self) -> None:
        from fnkit import func_reduce

        total = func_reduce(lambda a, b: a + b, 100)
        self.assertEqual(total([1, 2, 3]), 106)
        self.assertEqual(total([1, 2, 3], 1000), 1006)
        self.assertEqual(total([]), 100)

    def test_falsy_seeds_count_as_given(self) -> None:
        from fnkit import func_reduce

        total = func_reduce(lambda a, b: a + b, 100)
        self.assertEqual(total([1, 2, 3], 0), 6)
        self.assertEqual(func_reduce(lambda a, b: a + b, "")(["x", "y"]), "xy")
        self.assertEqual(func_reduce(lambda a, b: [a, b], None)([1]), [None, 1])

    def test_empty_input_without_seed(self) -> None:
        from fnkit import EmptySequenceError, func_reduce

        with self.assertRaises(EmptySequenceError):
            func_reduce(max)([])
        with self.assertRaises(ValueError):
            func_reduce(max)(iter(()))

    def test_repr_hides_missing_seed(self) -> None:
        from fnkit import func_reduce

        self.assertEqual(repr(func_reduce(max)), "func_reduce(max)")
        self.assertEqual(repr(func_reduce(max, 0)), "func_reduce(max, 0)")

    def test_single_element_without_seed(self) -> None:
        from fnkit import func_reduce

        self.assertEqual(func_reduce(lambda a, b: a + b)(["only"]), "only")

    def test_non_callable_fails_at_construction(self) -> None:
        from fnkit import NotCallableError, func_reduce

        with self.assertRaises(NotCallableError):
            func_reduce(None)


class FuncConcatTests(unittest.TestCase):
    def test_empty_composition_is_identity(self) -> None:
        from fnkit import func_concat

        identity = func_concat()
        for value in (0, "", None, [1, 2], object()):
            with self.subTest(value=value):
                self.assertIs(identity(value), value)

    def test_chain_applies_left_to_right(self) -> None:
        from fnkit import func_concat

        def f(x):
            return x + 1

        def g(x):
            return x * 10

        self.assertEqual(func_concat(f, g)(2), g(f(2)))
        self.assertEqual(func_concat(g, f)(2), f(g(2)))
        self.assertEqual(func_concat(f)(2), 3)
        self.assertEqual(func_concat(f, g, f, str)(1), "21")

    def test_first_link_receives_all_arguments(self) -> None:
        from fnkit import func_concat

        self.assertEqual(func_concat(max, str)(3, 9, key=lambda x: -x), "3")

    def test_slugify_example(self) -> None:
        from fnkit import ANY, func_apply, func_concat

        slugify = func_concat(str.lower, func_apply(str.replace, ANY, " ", "-"))
        self.assertEqual(slugify("There Be Dragons Here"), "there-be-dragons-here")

    def test_non_callable_link_fails_at_construction(self) -> None:
        from fnkit import NotCallableError, func_concat

        with self.assertRaises(NotCallableError) as ctx:
            func_concat(str.strip, "not callable", str.upper)
        self.assertIn("argument 1", str(ctx.exception))

    def test_not_callable_error_is_a_type_error(self) -> None:
        from fnkit import func_concat

        with self.assertRaises(TypeError):
            func_concat(1)

    def test_repr_lists_links(self) -> None:
        from fnkit import func_concat

        self.assertEqual(repr(func_concat(str.strip, str.title)), "func_concat(str.strip, str.title)")


class EndToEndTests(unittest.TestCase):
    def test_parse_name_list(self) -> None:
        from fnkit import ANY, func_apply, func_concat, func_map

        parse_names = func_concat(
            func_apply(str.strip, ANY, ", "),
            func_apply(str.split, ANY, ","),
            func_map(func_concat(str.strip, str.title)),
        )
        self.assertEqual(
            parse_names(" marshal, barney, lily , robin, ted mosby,"),
            ["Marshal", "Barney", "Lily", "Robin", "Ted Mosby"],
        )

    def test_explode_with_leading_bound_delimiter(self) -> None:
        from fnkit import ANY, func_apply, func_concat, func_map, func_reduce

        total = func_concat(
            func_apply(explode, ","),
            func_map(int),
            func_reduce(lambda a, b: a + b, 0),
        )
        self.assertEqual(total("1,2,3,4"), 10)
        self.assertEqual(func_apply(explode, ",", ANY, 2)("1,2,3,4"), ["1", "2,3,4"])


if __name__ == "__main__":
    unittest.main()
