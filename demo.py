#!/usr/bin/env python
from rich import print

from sdk.pystore import StoreClient, StoreError

def main():
    c = StoreClient(base_url="http://127.0.0.1:3000", api_key="mysecretapikey")

    # -----------------------------
    # Read the seed catalog
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nElectronics only...")
    print(c.list_products(category="electronics"))

    print("\nSearching for 'phone'...")
    print(c.search_products("phone"))

    print("\nCategory stats...")
    print(c.product_stats())

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nAdding a product...")
    kettle = c.create_product("Kettle", 35, description="1.7L electric kettle", category="kitchen")
    print(kettle)

    print("\nUpdating its price...")
    print(c.update_product(kettle["id"], name="Kettle", price=29.99))

    print("\nDeleting it...")
    print(c.delete_product(kettle["id"]))

    # -----------------------------
    # Errors come back as StoreError
    # -----------------------------
    try:
        c.get_product(kettle["id"])
    except StoreError as e:
        print(f"\n[red]{e}[/red]")

    anonymous = StoreClient(base_url=c.base_url)
    try:
        anonymous.create_product("Toaster", 20)
    except StoreError as e:
        print(f"[red]{e}[/red]")

if __name__ == "__main__":
    main()
