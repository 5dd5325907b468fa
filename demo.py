#!/usr/bin/env python
import os
import requests
from sdk.pycatalog import CatalogClient

def main():
    c = CatalogClient(base_url="http://127.0.0.1:8080", token=os.getenv("TOKEN", "12345"))

    # -----------------------------
    # Health check
    # -----------------------------
    print("Pinging server...")
    print(c.ping())

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    products = c.list_products()
    print(f"{len(products)} products loaded")

    # -----------------------------
    # Search by price
    # -----------------------------
    print("\nProducts priced above 100...")
    print(c.search_products(100))

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating product...")
    created = c.create_product("Demo Olive Oil", 40, "DEMO-OIL-1", True, "31/12/2099", 18.9)
    print(created)
    pid = created["id"]

    # -----------------------------
    # Duplicate code is rejected
    # -----------------------------
    print("\nCreating a product with the same code...")
    try:
        c.create_product("Another Oil", 1, "DEMO-OIL-1", False, "31/12/2099", 1.0)
    except requests.exceptions.HTTPError as e:
        print(e.response.status_code, e.response.json())

    # -----------------------------
    # Replace, then patch
    # -----------------------------
    print("\nReplacing product...")
    print(c.update_product(pid, "Demo Olive Oil XL", 20, "DEMO-OIL-1", True, "31/12/2099", 29.5))

    print("\nUnpublishing product...")
    print(c.patch_product(pid, is_published=False))

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting product...")
    c.delete_product(pid)
    try:
        c.get_product(pid)
    except requests.exceptions.HTTPError as e:
        print(e.response.status_code, e.response.json())

if __name__ == "__main__":
    main()
