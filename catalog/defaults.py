from .registry import ExampleCatalog


def create_default_catalog() -> ExampleCatalog:
    """Create the starter set of example decision trees."""
    catalog = ExampleCatalog(name="examples")

    catalog.register(
        "New Year Greeting",
        "Check if today is 2025-01-01 and send an SMS",
        {
            "rootAction": {
                "type": "condition",
                "expression": 'today == "2025-01-01"',
                "trueAction": {
                    "type": "send_sms",
                    "phoneNumber": "+1234567890",
                    "message": "Happy New Year!",
                },
            },
            "context": {"today": "2025-01-01"},
        },
    )

    catalog.register(
        "Send Email",
        "Send a single email",
        {
            "rootAction": {
                "type": "send_email",
                "sender": "service@example.com",
                "receiver": "user@example.com",
                "subject": "First Email",
                "body": "This is the first email",
            },
            "context": {},
        },
        note="A tree has one root action. Sequences of actions need separate executions.",
    )

    catalog.register(
        "10 Optional Mails",
        "Loop 10 times, check condition, send SMS if true",
        {
            "rootAction": {
                "type": "loop",
                "iterations": 10,
                "action": {
                    "type": "condition",
                    "expression": "loopIndex % 2 == 0",
                    "trueAction": {
                        "type": "send_sms",
                        "phoneNumber": "+1234567890",
                        "message": "Condition met for iteration",
                    },
                },
            },
            "context": {},
        },
    )

    return catalog
