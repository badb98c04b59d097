"""Rule-based generator of fake ORM records."""

from typing import Any, Callable, Dict, List

from faker import Faker

Rule = Callable[[Faker, Dict[str, Any]], Any]


class RecordFactory:
    """
    Builds instances of an ORM model from an ordered set of Faker rules.

    Each rule receives the Faker instance and the fields already computed for
    the current record, so later rules can derive their value from earlier
    ones (for example a user name copied from the email).
    """

    def __init__(self, model, fake: Faker):
        self.model = model
        self.fake = fake
        self.rules: Dict[str, Rule] = {}

    def rule_for(self, field: str, rule: Rule) -> "RecordFactory":
        """Register the rule producing the value of a field."""
        self.rules[field] = rule
        return self

    def generate_one(self):
        """Generate a single record, evaluating rules in registration order."""
        values: Dict[str, Any] = {}
        for field, rule in self.rules.items():
            values[field] = rule(self.fake, values)
        return self.model(**values)

    def generate(self, count: int) -> List:
        """Generate a list of independent records."""
        return [self.generate_one() for _ in range(count)]

    def __repr__(self):
        return f"<RecordFactory(model={self.model.__name__}, fields={list(self.rules)})>"
