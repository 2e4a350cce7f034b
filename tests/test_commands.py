import unittest

from redis_backed_model.entities.commands import FieldSet, SetAdd, SortedSetAdd, parse_wire


class TestCommands(unittest.TestCase):
    def test_wire_forms(self):
        self.assertEqual(FieldSet("widget:1", "colour", "red").to_wire(), "hset|widget:1|colour|red")
        self.assertEqual(SetAdd("widget_ids", 1).to_wire(), "sadd|widget_ids|1")
        self.assertEqual(SortedSetAdd("widgets_for_a_by_b:c", 2.5, 1).to_wire(), "zadd|widgets_for_a_by_b:c|2.5|1")

    def test_str_is_the_wire_form(self):
        command = SetAdd("widget_ids", 1)
        self.assertEqual(str(command), command.to_wire())

    def test_args(self):
        self.assertEqual(SortedSetAdd("k", "3", 9).args(), ("k", "3", 9))

    def test_values_are_not_coerced(self):
        self.assertEqual(FieldSet("widget:1", "count", 20).value, 20)
        self.assertEqual(SortedSetAdd("k", "wobble", 1).score, "wobble")

    def test_commands_are_frozen(self):
        command = SetAdd("widget_ids", 1)
        with self.assertRaises(AttributeError):
            command.member = 2

    def test_parse_wire(self):
        self.assertEqual(parse_wire("hset|widget:1|colour|red"), FieldSet("widget:1", "colour", "red"))
        self.assertEqual(parse_wire("sadd|widget_ids|1"), SetAdd("widget_ids", "1"))
        self.assertEqual(parse_wire("zadd|k|2|1"), SortedSetAdd("k", "2", "1"))

    def test_parse_wire_rejects_unknown_commands(self):
        with self.assertRaises(ValueError):
            parse_wire("del|widget:1")

    def test_parse_wire_rejects_wrong_arity(self):
        with self.assertRaises(ValueError):
            parse_wire("sadd|widget_ids")
        with self.assertRaises(ValueError):
            parse_wire("hset|widget:1|note|a|b")


if __name__ == "__main__":
    unittest.main()
