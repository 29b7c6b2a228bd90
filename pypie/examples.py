"""
Example classes used by the demo driver.

Greeter has a public method that calls a private one. Person extends
Greeter, counts its instances in a static member and overrides
`say_hello`, calling the parent's version first.
"""

from .model.catalog import Catalog
from .model.declarations import extends, private, public, static


def define_greeters(catalog: Catalog):
    """Define Greeter and Person in `catalog`; return both class objects."""
    greeter = catalog.define("Greeter")(
        public({
            "say_hello": lambda self, name: self.private_hello(name),
        }),
        private({
            "private_hello": lambda self, name: print("Hello " + name),
        }),
    )

    def constructor(self, name):
        self.name = name
        self.count = self.count + 1

    def say_hello(self, name):
        self.super.say_hello(name)
        print("Override hello")

    person = catalog.define("Person")(
        extends("Greeter"),
        static({"count": 0}),
        public({
            "constructor": constructor,
            "introduce": lambda self: self.private_intro(),
            "say_hello": say_hello,
        }),
        private({
            "private_intro": lambda self: print("Hi! My name is " + self.name),
        }),
    )
    return greeter, person
