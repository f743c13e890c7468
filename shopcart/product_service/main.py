# shopcart/product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {
    "p1": {"id": "p1", "name": "Keyboard", "price": "199.99"},
    "p2": {"id": "p2", "name": "Mouse", "price": "49.50"},
    "p3": {"id": "p3", "name": "Monitor", "price": "899.00"},
}


@app.get("/products")
def list_products():
    return list(PRODUCTS.values())


@app.get("/products/{product_id}")
def get_product(product_id: str):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
