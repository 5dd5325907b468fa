# cli.py - interactive catalog client with autocomplete
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pycatalog import CatalogClient
import requests

console = Console()
c = CatalogClient(base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:8080"), token=os.getenv("TOKEN"))


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=28)
    table.add_column("Code", width=10)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Expires", width=12)
    table.add_column("Published", width=10)

    for p in products:
        published = "[green]yes[/green]" if p.get("is_published") else "[dim]no[/dim]"
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("code_value", "N/A"),
            f"${p.get('price', 0):.2f}",
            str(p.get("quantity", 0)),
            p.get("expiration", "N/A"),
            published,
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def _error_message(e: Exception) -> str:
    # server errors come back as {"error": "..."}
    if isinstance(e, requests.exceptions.HTTPError) and e.response is not None:
        try:
            return f"HTTP {e.response.status_code}: {e.response.json().get('error', e.response.text)}"
        except ValueError:
            return f"HTTP {e.response.status_code}: {e.response.text}"
    return str(e)


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except requests.exceptions.RequestException as e:
        status_message = f"Error: {_error_message(e)}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    product_cache = try_api(c.list_products) or []


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_code_completer():
    if not product_cache:
        refresh_product_cache()
    codes = [p.get("code_value", "") for p in product_cache]
    return WordCompleter([code for code in codes if code], ignore_case=True)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog SDK",
        "[bold blue]Product Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    try:
        return int(raw)
    except ValueError:
        console.print("[red]Product ID must be an integer.[/red]")
        return None


def ask_token():
    # writes need the token header; ask once and keep it on the session
    if c.token:
        return
    token = Prompt.ask("🔑 Token", password=True)
    c.token = token
    c.session.headers.update({"token": token})


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Product name", default=current.get("name", "")),
        "quantity": IntPrompt.ask("📦 Quantity", default=current.get("quantity", 1)),
        "code_value": prompt_with_autocomplete("🏷️ Code", completer=get_code_completer(),
                                               default=current.get("code_value", "")),
        "is_published": Confirm.ask("Published?", default=current.get("is_published", True)),
        "expiration": Prompt.ask("📅 Expiration (DD/MM/YYYY)", default=current.get("expiration", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    # Preload products for autocomplete
    refresh_product_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Replace product"),
            ("2", "🔍 Search by price", "6", "🩹 Patch product"),
            ("3", "ℹ️ Get product by ID", "7", "🗑️ Delete product"),
            ("4", "➕ Create product", "8", "🏓 Ping server"),
            ("", "", "q", "👋 Quit")
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                show_products(products)

        elif choice == "2":
            price = ask_float("Show products priced above", default=100.0)
            res = try_api(c.search_products, price, success_msg=f"Search above {price:.2f} completed")
            if res is not None:
                if isinstance(res, str):
                    console.print(f"[yellow]{res}[/yellow]")
                else:
                    show_products(res)

        elif choice == "3":
            pid = ask_product_id()
            if pid is None:
                continue
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            ask_token()
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                show_products([resp])
                refresh_product_cache()

        elif choice == "5":
            pid = ask_product_id()
            if pid is None:
                continue
            current = try_api(c.get_product, pid)
            if current is None:
                continue
            ask_token()
            fields = ask_product_fields(current)
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} replaced", **fields)
            if resp:
                show_products([resp])
                refresh_product_cache()

        elif choice == "6":
            pid = ask_product_id()
            if pid is None:
                continue
            ask_token()
            field = prompt_with_autocomplete(
                "Field to change",
                completer=WordCompleter(["name", "quantity", "code_value", "is_published", "expiration", "price"])
            ).strip()
            if field == "quantity":
                value = IntPrompt.ask("New quantity")
            elif field == "price":
                value = ask_float("New price")
            elif field == "is_published":
                value = Confirm.ask("Published?")
            elif field in ("name", "code_value", "expiration"):
                value = Prompt.ask(f"New {field}")
            else:
                console.print(f"[red]Unknown field '{field}'[/red]")
                continue
            resp = try_api(c.patch_product, pid, success_msg=f"Product {pid} updated", **{field: value})
            if resp:
                show_products([resp])
                refresh_product_cache()

        elif choice == "7":
            pid = ask_product_id()
            if pid is None:
                continue
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                ask_token()
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_product_cache()

        elif choice == "8":
            resp = try_api(c.ping)
            if resp:
                console.print(Panel.fit(f"[green]{resp}[/green]", title="🏓 Ping"))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
