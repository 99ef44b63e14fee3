"""Order confirmation template, sent when an order is placed."""

from html import escape


class OrderConfirmationTemplate:
    name = "order_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        customer_name = context.get("customer_name", "there")
        total = context.get("total", "0.00")
        items = context.get("items", [])
        address = context.get("shipping_address") or {}

        lines = [f"  {item['quantity']} x {item['product_name']} @ {item['product_price']}" for item in items]
        address_lines = [
            address.get("line1"),
            address.get("line2"),
            ", ".join(p for p in (address.get("city"), address.get("state"), address.get("postal_code")) if p),
            address.get("country"),
        ]
        address_text = "\n".join(f"  {line}" for line in address_lines if line)

        body = (
            f"Dear {customer_name},\n\n"
            f"Thank you for your order #{order_id}.\n\n"
            "Items:\n" + "\n".join(lines) + "\n\n"
            f"Order Total: {total}\n\n"
            "Shipping to:\n" + address_text + "\n\n"
            "We'll let you know when your jewellery is on its way.\n\n"
            "Rai Aura"
        )

        rows = "".join(
            f"<tr><td>{escape(item['product_name'])}</td><td>{item['quantity']}</td>"
            f"<td>{escape(item['product_price'])}</td></tr>"
            for item in items
        )
        html_body = (
            f"<h1>RAI AURA</h1><p>Dear {escape(customer_name)},</p>"
            f"<p>Thank you for your order <strong>#{escape(order_id)}</strong>.</p>"
            f"<table><tr><th>Item</th><th>Qty</th><th>Price</th></tr>{rows}</table>"
            f"<p><strong>Order Total: {escape(total)}</strong></p>"
            f"<p>{'<br>'.join(escape(line) for line in address_lines if line)}</p>"
        )

        return {
            "subject": f"Order Confirmed - #{order_id}",
            "body": body,
            "html_body": html_body,
        }
