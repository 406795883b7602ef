"""Command handlers.

Each handler runs one command to completion: it prompts for what it needs,
makes at most one write through a repository, and prints the result. A
missing row or an unknown entity is reported and the handler returns; bad
numeric input raises ``ValueError`` to the caller.
"""

import datetime as dt
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from sqlmodel import Session

from dealdesk.cli.commands import HELP, Command, EntityKind, parse_entity
from dealdesk.cli.terminal import Terminal, parse_float
from dealdesk.entities import (
    Customer,
    CustomerRepository,
    DealRepository,
    Product,
    ProductRepository,
)

DEFAULT_GOOD = "something"
DEFAULT_PRICE = 100.0
DEFAULT_CATEGORY = "all"
DEFAULT_CUSTOMER_NAME = "anybody"

# Deals are recorded with a placeholder date rather than the database default.
UNSET_DEAL_DATE = dt.date.min

UNKNOWN_ENTITY = "Unknown entity"


class CommandResult(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


@dataclass
class ShopContext:
    """Everything a handler needs: the open session, its repositories and the terminal."""

    session: Session
    terminal: Terminal
    products: ProductRepository
    customers: CustomerRepository
    deals: DealRepository

    @classmethod
    def open(cls, session: Session, terminal: Terminal) -> "ShopContext":
        return cls(
            session=session,
            terminal=terminal,
            products=ProductRepository(session),
            customers=CustomerRepository(session),
            deals=DealRepository(session),
        )


def list_command(ctx: ShopContext) -> None:
    term = ctx.terminal
    entity = parse_entity(term.ask("What do you want to see [p=products,c=customers,d=deals]:"))

    if entity is EntityKind.PRODUCT:
        rows = ctx.products.list_all()
    elif entity is EntityKind.CUSTOMER:
        rows = ctx.customers.list_all()
    elif entity is EntityKind.DEAL:
        rows = ctx.deals.list_all()
    else:
        term.warn(UNKNOWN_ENTITY)
        return

    for row in rows:
        term.say(row)


def create_command(ctx: ShopContext) -> None:
    term = ctx.terminal
    entity = parse_entity(term.ask("What do you want to create [p=products,c=customers]:"))

    if entity is EntityKind.PRODUCT:
        good = term.ask_text("Enter good:", DEFAULT_GOOD)
        price_text = term.ask_text("Enter price:")
        price = DEFAULT_PRICE if price_text is None else parse_float(price_text)
        category = term.ask_text("Enter category:", DEFAULT_CATEGORY)

        product = ctx.products.add(Product(good=good, price=price, category=category))
        term.say(f"Product #{product.id} has been created!")
    elif entity is EntityKind.CUSTOMER:
        name = term.ask_text("Enter name:", DEFAULT_CUSTOMER_NAME)

        customer = ctx.customers.add(Customer(name=name))
        term.say(f"Customer #{customer.id} has been created!")
    else:
        term.warn(UNKNOWN_ENTITY)


def read_command(ctx: ShopContext) -> None:
    term = ctx.terminal
    entity = parse_entity(term.ask("What do you want to see [p=products,c=customers]:"))
    if entity not in (EntityKind.PRODUCT, EntityKind.CUSTOMER):
        term.warn(UNKNOWN_ENTITY)
        return

    entity_id = term.ask_int("Enter ID:")
    if entity is EntityKind.PRODUCT:
        found: Product | Customer | None = ctx.products.get(entity_id)
        label = "Product"
    else:
        found = ctx.customers.get(entity_id)
        label = "Customer"

    if found is None:
        term.say(f"{label} #{entity_id} not found")
    else:
        term.say(found)


def update_command(ctx: ShopContext) -> None:
    term = ctx.terminal
    entity = parse_entity(term.ask("What do you want to update [p=products,c=customers]:"))
    if entity not in (EntityKind.PRODUCT, EntityKind.CUSTOMER):
        term.warn(UNKNOWN_ENTITY)
        return

    entity_id = term.ask_int("Enter ID:")
    if entity is EntityKind.PRODUCT:
        _update_product(ctx, entity_id)
    else:
        _update_customer(ctx, entity_id)


def _update_product(ctx: ShopContext, product_id: int) -> None:
    term = ctx.terminal
    product = ctx.products.get(product_id)
    if product is None:
        term.say(f"Product #{product_id} not found")
        return

    term.say(f"Current product: {product}")
    changes: dict[str, object] = {}

    good = term.ask_text("Enter new good [empty = without changes]:")
    if good is not None:
        changes["good"] = good

    price = term.ask_text("Enter new price [empty = without changes]:")
    if price is not None:
        changes["price"] = parse_float(price)

    category = term.ask_text("Enter new category [empty = without changes]:")
    if category is not None:
        changes["category"] = category

    ctx.products.update(product.model_copy(update=changes))


def _update_customer(ctx: ShopContext, customer_id: int) -> None:
    term = ctx.terminal
    customer = ctx.customers.get(customer_id)
    if customer is None:
        term.say(f"Customer #{customer_id} not found")
        return

    term.say(f"Current customer: {customer}")
    changes: dict[str, object] = {}

    name = term.ask_text("Enter new name [empty = without changes]:")
    if name is not None:
        changes["name"] = name

    ctx.customers.update(customer.model_copy(update=changes))


def delete_command(ctx: ShopContext) -> None:
    term = ctx.terminal
    entity = parse_entity(term.ask("What do you want to remove [p=products,c=customers]:"))
    if entity is EntityKind.PRODUCT:
        label, remove = "Product", ctx.products.remove
    elif entity is EntityKind.CUSTOMER:
        label, remove = "Customer", ctx.customers.remove
    else:
        term.warn(UNKNOWN_ENTITY)
        return

    entity_id = term.ask_int("Enter ID:")
    if remove(entity_id):
        term.say(f"{label} #{entity_id} has been removed!")
    else:
        term.say(f"{label} #{entity_id} does not exist!")


def deal_command(ctx: ShopContext) -> None:
    """Record a purchase of one product by one customer."""
    term = ctx.terminal
    customer_id = term.ask_int("Enter your customer ID:")
    customer = ctx.customers.get(customer_id)
    if customer is None:
        term.say(f"Customer #{customer_id} not found")
        return

    term.say(
        f"Hello {customer.name}! Your deals amount is: "
        f"{ctx.deals.count_for_customer(customer_id)}"
    )

    term.say("Our store has these products:")
    for product in ctx.products.list_all():
        term.say(product)

    product_id = term.ask_int("What do you want to buy:")
    product = ctx.products.get(product_id)
    if product is None:
        term.say(f"Product #{product_id} not found")
        return

    deal = ctx.deals.add(product_id, customer_id, amount=1, date=UNSET_DEAL_DATE)
    term.say(f"Deal recorded: {deal}")


_HANDLERS: dict[Command, Callable[[ShopContext], None]] = {
    Command.LIST: list_command,
    Command.CREATE: create_command,
    Command.READ: read_command,
    Command.UPDATE: update_command,
    Command.DELETE: delete_command,
    Command.DEAL: deal_command,
}


def dispatch(ctx: ShopContext, command: Command) -> CommandResult:
    if command is Command.EXIT:
        return CommandResult.EXIT

    handler = _HANDLERS.get(command)
    if handler is None:
        ctx.terminal.warn(f"Unknown command. {HELP}")
    else:
        handler(ctx)
    return CommandResult.CONTINUE
