"""Test landing page rendering."""

from landing_page.models import Product
from landing_page.template import render_page


def widget():
    return Product(
        id="1",
        title="Widget",
        summary="A widget",
        imageUrl="http://x/i.png",
        mercadoLibreUrl="http://ml/1",
        whatsappLink="http://wa/1",
    )


class TestRenderPage:
    def test_one_card_per_product(self):
        products = [widget(), widget().model_copy(update={"id": "2", "title": "Gadget"}), widget()]

        html = render_page(products)

        assert html.count('class="product-card') == 3
        assert "empty-state" not in html

    def test_widget_card_contents(self):
        html = render_page([widget()])

        assert '<h3 class="text-2xl font-bold text-gray-900 mb-2">Widget</h3>' in html
        assert 'src="http://x/i.png"' in html
        assert 'href="http://wa/1"' in html
        assert 'href="http://ml/1"' in html
        assert "A widget" in html

    def test_empty_list_renders_single_fallback(self):
        html = render_page([])

        assert html.count('class="empty-state') == 1
        assert "product-card" not in html
        assert "No se encontraron productos." in html
        assert "Intenta de nuevo más tarde." in html

    def test_fallback_carries_error_message(self):
        html = render_page([], "🚨 Error al obtener datos de la API: Connection refused")

        assert "🚨 Error al obtener datos de la API: Connection refused" in html
        assert "Intenta de nuevo más tarde." not in html

    def test_page_shell(self):
        html = render_page([])

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="es">' in html
        assert "https://cdn.tailwindcss.com" in html
        assert "https://fonts.googleapis.com/css2?family=Inter" in html
        assert "Nuestros Productos Destacados" in html

    def test_missing_attributes_render_blank(self):
        html = render_page([Product(id="9")])

        assert html.count('class="product-card') == 1
        assert "None" not in html
        assert "<img" not in html
        assert '<h3 class="text-2xl font-bold text-gray-900 mb-2"></h3>' in html

    def test_values_are_escaped(self):
        html = render_page([widget().model_copy(update={"title": "<script>alert(1)</script>"})])

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_rendering_is_deterministic(self):
        assert render_page([widget()]) == render_page([widget()])
