"""
Command tree tests (construction, arity, actions, usage lines).

Scope
- Attaching sub-commands, default sub-commands and naming rules.
- Leaf arity checks and action installation (decorators and subclasses).
- Partial matching inheritance and lookups.
- Paths and usage strings of detached trees.

Conventions
- Test method names follow CamelCase per project convention.
- Trees are built without a CommandParser unless a parser is needed.
"""
import unittest
from unittest import TestCase

from cmdparse import (
    Command,
    command,
    TakesNoCommandError,
    TakesNoChildrenError,
    NotEnoughArgumentsError,
    TooManyArgumentsError,
)


class CommandTreeTest(TestCase):
    """Attaching and looking up sub-commands."""

    def setUp(self) -> None:
        self.root = Command("net")
        self.ipaddr = self.root.add_command(Command("ipaddr", descr="Manage IP addresses"))
        self.add = self.ipaddr.add_command(Command("add", takes_commands=False, variadic=True))
        self.delete = self.ipaddr.add_command(Command("del", takes_commands=False, variadic=True))

    def testAddCommandAttachesChild(self) -> None:
        self.assertIs(self.ipaddr.parent, self.root)
        self.assertIs(self.root.children["ipaddr"], self.ipaddr)
        self.assertEqual(list(self.ipaddr.children), ["add", "del"])

    def testDefaultCommand(self) -> None:
        self.assertIsNone(self.ipaddr.default_command)
        self.ipaddr.add_command(Command("list", takes_commands=False), default=True)
        self.assertEqual(self.ipaddr.default_command, "list")
        # a later default replaces the earlier one
        self.ipaddr.add_command(Command("show", takes_commands=False), default=True)
        self.assertEqual(self.ipaddr.default_command, "show")

    def testDuplicateNameRaises(self) -> None:
        with self.assertRaises(ValueError):
            self.ipaddr.add_command(Command("add", takes_commands=False))

    def testAttachingTwiceRaises(self) -> None:
        with self.assertRaises(ValueError):
            self.root.add_command(self.add)

    def testLeafRejectsChildren(self) -> None:
        with self.assertRaises(TakesNoCommandError):
            self.add.add_command(Command("more"))
        self.assertIs(TakesNoChildrenError, TakesNoCommandError)

    def testLeafSwitchWithChildrenRaises(self) -> None:
        with self.assertRaises(ValueError):
            self.ipaddr.takes_commands = False
        self.add.takes_commands = True
        self.assertTrue(self.add.takes_commands)

    def testPathAndRoot(self) -> None:
        self.assertEqual(self.root.path, ())
        self.assertEqual(self.add.path, (self.ipaddr, self.add))
        self.assertIs(self.add.root, self.root)
        self.assertIsNone(self.add.parser)
        self.assertIsNone(self.add.data)

    def testPartialInheritance(self) -> None:
        self.assertFalse(self.add.partial)
        self.root.partial = True
        self.assertTrue(self.ipaddr.partial)
        self.assertTrue(self.add.partial)
        self.ipaddr.partial = False
        self.assertFalse(self.add.partial)

    def testLookup(self) -> None:
        self.assertIsNone(self.ipaddr.lookup("a"))
        self.ipaddr.partial = True
        self.assertIs(self.ipaddr.lookup("a"), self.add)
        self.assertIs(self.ipaddr.lookup("del"), self.delete)
        self.assertIsNone(self.ipaddr.lookup("x"))

    def testSorting(self) -> None:
        self.assertEqual([node.name for node in sorted(self.ipaddr.children.values(), reverse=True)], ["del", "add"])

    def testNameValidation(self) -> None:
        with self.assertRaises(TypeError):
            Command(1)
        with self.assertRaises(ValueError):
            Command("  ")
        with self.assertRaises(ValueError):
            Command("two words")
        self.assertEqual(Command(" trimmed ").name, "trimmed")

    def testRepr(self) -> None:
        self.assertTrue(repr(self.add).startswith("command(name='add'"))
        self.assertEqual(type(self.add).__typename__, "command")


class CommandArityTest(TestCase):
    """Leaf arity checks and action plumbing."""

    def testArityValidation(self) -> None:
        with self.assertRaises(ValueError):
            Command("stat", takes_commands=False, minimum=-1)
        with self.assertRaises(TypeError):
            Command("stat", takes_commands=False, minimum="1")
        with self.assertRaises(TypeError):
            Command("stat", takes_commands=False, minimum=True)
        with self.assertRaises(TypeError):
            Command("stat", takes_commands=False, variadic=1)

    def testFixedArity(self) -> None:
        leaf = Command("copy", takes_commands=False, minimum=2)
        leaf.action(lambda source, target: (source, target))
        self.assertEqual(leaf.invoke(["a", "b"]), ("a", "b"))
        with self.assertRaises(NotEnoughArgumentsError):
            leaf.invoke(["a"])
        with self.assertRaises(TooManyArgumentsError):
            leaf.invoke(["a", "b", "c"])

    def testVariadicArity(self) -> None:
        leaf = Command("add", takes_commands=False, minimum=1, variadic=True)
        leaf.action(lambda *ips: ips)
        self.assertEqual(leaf.invoke(["1", "2", "3"]), ("1", "2", "3"))
        with self.assertRaises(NotEnoughArgumentsError):
            leaf.invoke([])

    def testZeroArity(self) -> None:
        leaf = Command("list", takes_commands=False)
        leaf.action(lambda: "listed")
        self.assertEqual(leaf.invoke([]), "listed")
        with self.assertRaises(TooManyArgumentsError) as context:
            leaf.invoke(["extra"])
        self.assertEqual(str(context.exception), "Too many arguments: list expects 0, got 1")

    def testActionDecoratorRedeclaresArity(self) -> None:
        leaf = Command("greet", takes_commands=False)

        @leaf.action(minimum=1)
        def greet(name):
            return name.upper()

        self.assertEqual(leaf.arity, (1, False))
        self.assertEqual(leaf.invoke(["ada"]), "ADA")

    def testExecuteWithoutAction(self) -> None:
        with self.assertRaises(NotImplementedError):
            Command("idle", takes_commands=False).invoke([])

    def testExecuteOverride(self) -> None:
        class Echo(Command):
            def __init__(self):
                super().__init__("echo", takes_commands=False, variadic=True)

            def execute(self, *words):
                return " ".join(words)

        self.assertEqual(Echo().invoke(["a", "b"]), "a b")
        self.assertEqual(Echo.__typename__, "echo")

    def testSetArity(self) -> None:
        leaf = Command("copy", takes_commands=False)
        leaf.set_arity(2, variadic=True)
        self.assertEqual((leaf.minimum, leaf.variadic), (2, True))


class CommandBuilderTest(TestCase):
    """Decorator conveniences creating leaves."""

    def setUp(self) -> None:
        self.root = Command("net")

    def testCommandDecoratorWithName(self) -> None:
        @self.root.command("add", variadic=True, descr="Add an IP address")
        def add(*ips):
            return ips

        self.assertIsInstance(add, Command)
        self.assertIs(self.root.children["add"], add)
        self.assertFalse(add.takes_commands)
        self.assertEqual(add.invoke(["1", "2"]), ("1", "2"))

    def testBareCommandDecorator(self) -> None:
        @self.root.command
        def stat():
            """Show network statistics.

            Longer text is not used as the short description.
            """
            return "stat"

        self.assertEqual(stat.name, "stat")
        self.assertEqual(stat.descr, "Show network statistics.")
        self.assertIsNone(self.root.default_command)

    def testDefaultThroughDecorator(self) -> None:
        @self.root.command("list", default=True)
        def listing():
            pass

        self.assertEqual(self.root.default_command, "list")

    def testCommandFactory(self) -> None:
        node = command(lambda name: name, name="echo", minimum=1)
        self.assertEqual(node.name, "echo")
        self.assertEqual(node.invoke(["x"]), "x")

        @command(name="copy", minimum=2)
        def copy(source, target):
            return target

        self.assertEqual(copy.invoke(["a", "b"]), "b")

    def testFactoryRejectsNonCallable(self) -> None:
        with self.assertRaises(TypeError):
            command("not callable")


class CommandUsageTest(TestCase):
    """Usage lines assembled from the tree."""

    def setUp(self) -> None:
        self.root = Command("net")
        self.ipaddr = self.root.add_command(Command("ipaddr"))
        self.add = self.ipaddr.add_command(Command(
            "add",
            takes_commands=False,
            variadic=True,
            arguments={"IP": "An IP address"},
        ))

    def testInteriorUsage(self) -> None:
        self.assertEqual(self.root.usage, "Usage: net COMMAND [options]")
        self.assertEqual(self.ipaddr.usage, "Usage: net ipaddr COMMAND [options]")

    def testLeafUsage(self) -> None:
        self.assertEqual(self.add.usage, "Usage: net ipaddr add [IP...]")
        self.add.set_arity(1, variadic=True)
        self.assertEqual(self.add.usage, "Usage: net ipaddr add IP [ARG...]")
        self.add.set_arity(2)
        self.assertEqual(self.add.usage, "Usage: net ipaddr add IP ARG")

    def testOptionsMarker(self) -> None:
        self.ipaddr.options.add_argument("--all", action="store_true")
        self.assertEqual(self.add.usage, "Usage: net ipaddr [options] add [IP...]")


if __name__ == "__main__":
    unittest.main()
