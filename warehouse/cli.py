import io
import logging
import sys
import tempfile
from pathlib import Path
from typing import NamedTuple, Optional, TextIO

from .core import Warehouse
from .delivery import ReportDelivery
from .exceptions import (
    InvalidArgumentError,
    ReportDeliveryError,
    UnsupportedOperationError,
    WarehouseError,
)
from .export import ExportType
from .factory import DependencyFactory
from .logger import setup_logger
from .plot import ChartType
from .schemas import ReportType

logger = logging.getLogger(__name__)

BACK = -1


class MenuOption(NamedTuple):
    number: int
    label: str


def _numbered(labels: list[str]) -> list[MenuOption]:
    return [MenuOption(i, label) for i, label in enumerate(labels, start=1)]


MAIN_MENU_OPTIONS = _numbered(
    [
        "Manage products",
        "Manage customers",
        "Manage orders",
        "Manage inventory",
        "Export reports",
        "Report charts",
        "Settings",
        "Exit program",
    ]
)


def _crud_options(entity: str) -> list[MenuOption]:
    return _numbered(
        [
            f"List {entity}s",
            f"Add {entity}",
            f"Update {entity}",
            f"Delete {entity}",
            "Go back to previous menu",
        ]
    )


PRODUCT_OPTIONS = _crud_options("product")
CUSTOMER_OPTIONS = _crud_options("customer")
ORDER_OPTIONS = _crud_options("order")
INVENTORY_OPTIONS = _numbered(["List stock levels", "Go back to previous menu"])
REPORT_OPTIONS = _numbered(["Daily revenue report", "Go back to previous menu"])
SETTINGS_OPTIONS = _numbered(["Configure report delivery", "Go back to previous menu"])

SUB_MENU_OPTIONS = {
    1: PRODUCT_OPTIONS,
    2: CUSTOMER_OPTIONS,
    3: ORDER_OPTIONS,
    4: INVENTORY_OPTIONS,
    5: REPORT_OPTIONS,
    6: REPORT_OPTIONS,
    7: SETTINGS_OPTIONS,
}

EXPORT_OPTIONS = _numbered([f"Export to {t.value}" for t in ExportType] + ["Go back to previous menu"])
CHART_OPTIONS = _numbered([f"Create {t.value} plot" for t in ChartType] + ["Go back to previous menu"])

# Report menu choice -> report type
REPORT_TYPES = {1: ReportType.DAILY_REVENUE}


class Cli:
    """
    Numbered-menu text interface over a Warehouse.
    Reads choices line by line from stdin (or any text stream) and answers
    on stdout; error messages go to stderr. End of input leaves the program.
    """

    def __init__(
        self,
        factory: DependencyFactory,
        warehouse: Warehouse,
        report_deliveries: list[ReportDelivery],
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
        stderr: TextIO = sys.stderr,
        chart_dir: Optional[Path] = None,
    ):
        if not report_deliveries:
            raise InvalidArgumentError("At least one report delivery is required.")
        self.factory = factory
        self.warehouse = warehouse
        self.report_deliveries = report_deliveries
        self.active_report_delivery = report_deliveries[0]
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.chart_dir = chart_dir
        self.report_delivery_options = _numbered(
            [f"Switch to '{d.name}'" for d in report_deliveries] + ["Go back to previous menu"]
        )

    # --- I/O helpers ---

    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _error(self, text: str) -> None:
        self.stderr.write(text + "\n")

    def _prompt(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _prompt_int(self, text: str, what: str) -> int:
        value = self._prompt(text)
        try:
            return int(value)
        except ValueError as e:
            raise InvalidArgumentError(f"The {what} must be an integer.") from e

    # --- Menus ---

    def run(self) -> None:
        try:
            self._main_loop()
        except EOFError:
            self._print()
        logger.info("CLI session finished.")

    def _main_loop(self) -> None:
        while True:
            self._display_menu(MAIN_MENU_OPTIONS)
            try:
                main_choice = self._choose_menu_option(MAIN_MENU_OPTIONS)
            except WarehouseError as e:
                self._error(str(e))
                continue
            except ValueError:
                self._error("Invalid input. Enter a number.")
                continue
            if main_choice == BACK:
                return
            self._sub_menu_loop(main_choice)

    def _sub_menu_loop(self, main_choice: int) -> None:
        options = SUB_MENU_OPTIONS[main_choice]
        while True:
            self._display_menu(options)
            try:
                sub_choice = self._choose_menu_option(options)
                if sub_choice == BACK:
                    return
                self._do_menu_action(main_choice, sub_choice)
            except WarehouseError as e:
                self._error(str(e))
            except ValueError:
                self._error("Invalid input. Enter a number.")

    def _display_menu(self, options: list[MenuOption]) -> None:
        for option in options:
            self._print(f"{option.number}.\t{option.label}")

    def _choose_menu_option(self, options: list[MenuOption]) -> int:
        """Returns the chosen number, or BACK when the last option is picked."""
        choice = int(self._prompt("Enter a menu option and press RETURN: "))
        first, last = options[0], options[-1]
        if choice < first.number or choice > last.number:
            raise InvalidArgumentError(
                f"Invalid menu choice. Available options are: {first.number} to {last.number}."
            )
        return BACK if choice == last.number else choice

    def _do_menu_action(self, main_choice: int, sub_choice: int) -> None:
        actions = {
            1: self._do_product_action,
            2: self._do_customer_action,
            3: self._do_order_action,
            4: self._do_inventory_action,
            5: self._do_report_action,
            6: self._do_chart_action,
            7: self._do_settings_action,
        }
        actions[main_choice](sub_choice)

    # --- Products / customers / orders / inventory ---

    def _do_product_action(self, choice: int) -> None:
        if choice == 1:
            self._list_products()
        elif choice == 2:
            self._add_product()
        elif choice == 3:
            raise UnsupportedOperationError("Updating products not yet implemented.")
        else:
            raise UnsupportedOperationError("Deleting products not yet implemented.")

    def _do_customer_action(self, choice: int) -> None:
        if choice == 1:
            self._list_customers()
        elif choice == 2:
            raise UnsupportedOperationError("Adding customers not yet implemented.")
        elif choice == 3:
            raise UnsupportedOperationError("Updating customers not yet implemented.")
        else:
            raise UnsupportedOperationError("Deleting customers not yet implemented.")

    def _do_order_action(self, choice: int) -> None:
        if choice == 1:
            self._list_orders()
        elif choice == 2:
            self._add_order()
        elif choice == 3:
            raise UnsupportedOperationError("Updating orders not yet implemented.")
        else:
            raise UnsupportedOperationError("Deleting orders not yet implemented.")

    def _do_inventory_action(self, choice: int) -> None:
        self._list_inventory()

    def _list_products(self) -> None:
        products = self.warehouse.get_products()
        id_w = max((len(str(p.id)) for p in products), default=0)
        name_w = max((len(p.name) for p in products), default=0)
        price_w = max((len(str(p.price)) for p in products), default=0)
        for p in products:
            self._print(f"\t{p.id:>{id_w}}\t\t{p.name:>{name_w}}\t\t{p.price:>{price_w}}")

    def _add_product(self) -> None:
        name = self._prompt("Enter the product's name and press RETURN: ")
        price = self._prompt_int("Enter the product's price and press RETURN: ", "product's price")
        product = self.warehouse.add_product(name, price)
        self._print(f"Added product {product.id}.")

    def _list_customers(self) -> None:
        customers = self.warehouse.get_customers()
        id_w = max((len(str(c.id)) for c in customers), default=0)
        name_w = max((len(c.name) for c in customers), default=0)
        for c in customers:
            self._print(f"\t{c.id:>{id_w}}\t\t{c.name:>{name_w}}")

    def _list_orders(self) -> None:
        orders = self.warehouse.get_orders()
        id_w = max((len(str(o.id)) for o in orders), default=0)
        name_w = max((len(o.customer.name) for o in orders), default=0)
        cid_w = max((len(str(o.customer.id)) for o in orders), default=0)
        total_w = max((len(str(o.total_price)) for o in orders), default=0)
        for o in orders:
            status = "pending" if o.pending else "fulfilled"
            self._print(
                f"\t{o.id:>{id_w}} {o.date.isoformat()}"
                f"\t\t{o.customer.name:>{name_w}} ({o.customer.id:>{cid_w}})"
                f"\t\t{o.total_price:>{total_w}} [{status}]"
            )

    def _add_order(self) -> None:
        customer_id = self._prompt_int("Enter the customer's ID and press RETURN: ", "customer's ID")
        quantities: dict[int, int] = {}
        while True:
            product_line = self._prompt("Enter the product's ID (or nothing to stop) and press RETURN: ")
            if not product_line:
                break
            quantity_line = self._prompt("Enter the desired quantity (or nothing to stop) and press RETURN: ")
            if not quantity_line:
                break
            try:
                product_id = int(product_line)
            except ValueError as e:
                raise InvalidArgumentError("The product's ID must be an integer.") from e
            try:
                quantity = int(quantity_line)
            except ValueError as e:
                raise InvalidArgumentError("The quantity must be an integer.") from e
            quantities[product_id] = quantity
        order = self.warehouse.add_order(customer_id, quantities)
        self._print(f"Added order {order.id}.")

    def _list_inventory(self) -> None:
        names = {p.id: p.name for p in self.warehouse.get_products()}
        stock = self.warehouse.get_inventory()
        id_w = max((len(str(pid)) for pid in stock), default=0)
        name_w = max((len(names.get(pid, "")) for pid in stock), default=0)
        for product_id, quantity in stock.items():
            self._print(f"\t{product_id:>{id_w}}\t\t{names.get(product_id, ''):>{name_w}}\t\t{quantity}")

    # --- Reports ---

    def _do_report_action(self, choice: int) -> None:
        report_type = REPORT_TYPES[choice]
        report = self.warehouse.generate_report(report_type)

        self._display_menu(EXPORT_OPTIONS)
        export_choice = self._choose_menu_option(EXPORT_OPTIONS)
        if export_choice == BACK:
            return
        export_type = list(ExportType)[export_choice - 1]

        buffer = io.StringIO()
        self.factory.new_exporter(export_type)(report, buffer)
        content = buffer.getvalue()
        self.stdout.write(content)

        try:
            self.active_report_delivery.deliver(report_type, export_type, content.encode("utf-8"))
        except ReportDeliveryError as e:
            self._error(str(e))

    def _do_chart_action(self, choice: int) -> None:
        report_type = REPORT_TYPES[choice]
        report = self.warehouse.generate_report(report_type)

        self._display_menu(CHART_OPTIONS)
        chart_choice = self._choose_menu_option(CHART_OPTIONS)
        if chart_choice == BACK:
            return
        chart_type = list(ChartType)[chart_choice - 1]

        plotter = self.factory.new_plotter(chart_type)
        try:
            with tempfile.NamedTemporaryFile(suffix=".png", dir=self.chart_dir, delete=False) as f:
                plotter(report, f)
        except OSError as e:
            raise WarehouseError(f"Problem while creating chart: {e}") from e
        self._print(f"Chart created at: {Path(f.name).resolve().as_uri()}")

    # --- Settings ---

    def _do_settings_action(self, choice: int) -> None:
        self._display_menu(self.report_delivery_options)
        delivery_choice = self._choose_menu_option(self.report_delivery_options)
        if delivery_choice == BACK:
            return
        self.active_report_delivery = self.report_deliveries[delivery_choice - 1]
        self._print(f"Selected '{self.active_report_delivery.name}'.")


def main() -> int:
    setup_logger()
    try:
        factory = DependencyFactory()
        warehouse = factory.new_warehouse()
    except WarehouseError as e:
        logger.error(f"❌ {e}")
        return 1
    Cli(factory, warehouse, factory.new_report_deliveries()).run()
    return 0
