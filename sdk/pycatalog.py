# sdk/pycatalog.py
import requests
import httpx
from typing import Optional, Dict, Any, List, Union
from rich import print

class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8080", token: Optional[str] = None, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        self.token = token
        if token:
            self.session.headers.update({"token": token})

    @staticmethod
    def _data(r: requests.Response) -> Any:
        # every successful response is wrapped as {"data": ...}
        r.raise_for_status()
        return r.json()["data"]

    @staticmethod
    def _product_payload(name: str, quantity: int, code_value: str, is_published: bool,
                         expiration: str, price: float) -> Dict[str, Any]:
        return {
            "name": name,
            "quantity": quantity,
            "code_value": code_value,
            "is_published": is_published,
            "expiration": expiration,
            "price": price,
        }

    def ping(self) -> str:
        r = self.session.get(f"{self.base_url}/ping", timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Read
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/products/all", timeout=self.timeout)
        return self._data(r)

    def get_product(self, product_id: int) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return self._data(r)

    def search_products(self, price_gt: float) -> Union[List[Dict[str, Any]], str]:
        r = self.session.get(f"{self.base_url}/products/search", params={"priceGt": price_gt}, timeout=self.timeout)
        if r.status_code == 404:
            return f"No product priced above {price_gt}"
        return self._data(r)

    # Write (token header required)
    def create_product(self, name: str, quantity: int, code_value: str, is_published: bool,
                       expiration: str, price: float) -> Dict[str, Any]:
        payload = self._product_payload(name, quantity, code_value, is_published, expiration, price)
        r = self.session.post(f"{self.base_url}/products/new", json=payload, timeout=self.timeout)
        return self._data(r)

    def update_product(self, product_id: int, name: str, quantity: int, code_value: str,
                       is_published: bool, expiration: str, price: float) -> Dict[str, Any]:
        payload = self._product_payload(name, quantity, code_value, is_published, expiration, price)
        r = self.session.put(f"{self.base_url}/products/{product_id}", json=payload, timeout=self.timeout)
        return self._data(r)

    def patch_product(self, product_id: int, **fields) -> Dict[str, Any]:
        r = self.session.patch(f"{self.base_url}/products/{product_id}", json=fields, timeout=self.timeout)
        return self._data(r)

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()

    # Async create (example); callers inspect the raw response
    async def create_product_async(self, name: str, quantity: int, code_value: str, is_published: bool,
                                   expiration: str, price: float) -> httpx.Response:
        payload = self._product_payload(name, quantity, code_value, is_published, expiration, price)
        headers = {"token": self.token} if self.token else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(f"{self.base_url}/products/new", json=payload, headers=headers)


def _parse_bool(raw: str) -> bool:
    return raw.lower() in ("1", "true", "yes", "y")


if __name__ == "__main__":
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=os.getenv("CATALOG_URL", "http://127.0.0.1:8080"))
    parser.add_argument("--token", default=os.getenv("TOKEN"), help="Token for write commands")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("ping", help="Check the server is up")
    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    sp = subparsers.add_parser("search", help="Products priced above a value")
    sp.add_argument("--price-gt", type=float, required=True, help="Lower price bound (exclusive)")

    def _add_product_args(p, required: bool = True):
        p.add_argument("--name", required=required, help="Product name")
        p.add_argument("--quantity", type=int, required=required, help="Quantity available")
        p.add_argument("--code-value", required=required, help="Unique product code")
        p.add_argument("--published", type=_parse_bool, required=required, help="true/false")
        p.add_argument("--expiration", required=required, help="Expiration date, DD/MM/YYYY")
        p.add_argument("--price", type=float, required=required, help="Unit price")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    _add_product_args(cp)

    up = subparsers.add_parser("update-product", help="Replace every field of a product")
    up.add_argument("--product-id", type=int, required=True)
    _add_product_args(up)

    pp = subparsers.add_parser("patch-product", help="Change some fields of a product")
    pp.add_argument("--product-id", type=int, required=True)
    _add_product_args(pp, required=False)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", type=int, required=True)

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url, token=args.token)

    try:
        if args.command == "ping":
            print(c.ping())
        elif args.command == "list-products":
            print(c.list_products())
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "search":
            print(c.search_products(args.price_gt))
        elif args.command == "create-product":
            print(c.create_product(args.name, args.quantity, args.code_value, args.published,
                                   args.expiration, args.price))
        elif args.command == "update-product":
            print(c.update_product(args.product_id, args.name, args.quantity, args.code_value,
                                   args.published, args.expiration, args.price))
        elif args.command == "patch-product":
            fields = {
                "name": args.name,
                "quantity": args.quantity,
                "code_value": args.code_value,
                "is_published": args.published,
                "expiration": args.expiration,
                "price": args.price,
            }
            print(c.patch_product(args.product_id, **{k: v for k, v in fields.items() if v is not None}))
        elif args.command == "delete-product":
            c.delete_product(args.product_id)
            print(f"[green]Deleted product {args.product_id}[/green]")
    except requests.exceptions.HTTPError as e:
        try:
            message = e.response.json().get("error", e.response.text)
        except ValueError:
            message = e.response.text
        print(f"[red]HTTP {e.response.status_code}: {message}[/red]")
        raise SystemExit(1)
