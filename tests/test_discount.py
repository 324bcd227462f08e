import io

from sarcshop.discount import DiscountManager, discount_admin_menu


def _answers(*values):
    queue = list(values)

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return fake_input


def test_add_and_get(tmp_path):
    manager = DiscountManager(tmp_path / "discounts.dat")
    manager.add_discount_code("SAVE10", 10)
    assert manager.get_discount("SAVE10") == 10
    assert manager.get_discount("NOPE") == 0


def test_persisted_round_trip(tmp_path):
    path = tmp_path / "discounts.dat"
    DiscountManager(path).add_discount_code("SAVE10", 10)
    assert DiscountManager(path).discounts == {"SAVE10": 10}


def test_load_replaces_memory(tmp_path):
    path = tmp_path / "discounts.dat"
    manager = DiscountManager(path)
    manager.discounts["TEMP"] = 5
    path.write_text("BIG 50\n")
    manager.load_discounts()
    assert manager.discounts == {"BIG": 50}


def test_render_format(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    manager.add_discount_code("SAVE10", 10)
    assert manager.render() == "\n🎟️ Available Coupons:\n🔸     SAVE10 : 10% off\n"


def test_menu_adds_coupon(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    out = io.StringIO()
    discount_admin_menu(manager, _answers("1", "SAVE20", "20", "3"), out)
    assert manager.get_discount("SAVE20") == 20
    assert "✅ Coupon added: SAVE20 - 20% off\n" in out.getvalue()


def test_menu_truncates_fraction(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    discount_admin_menu(manager, _answers("1", "HALF", "12.7", "3"), io.StringIO())
    assert manager.get_discount("HALF") == 12


def test_menu_rejects_out_of_range(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    out = io.StringIO()
    discount_admin_menu(manager, _answers("1", "HUGE", "95", "3"), out)
    assert manager.get_discount("HUGE") == 0
    assert "❌ Invalid discount percentage.\n" in out.getvalue()


def test_menu_bad_choice_then_listing(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    manager.add_discount_code("SAVE10", 10)
    out = io.StringIO()
    discount_admin_menu(manager, _answers("abc", "7", "2", "3"), out)
    text = out.getvalue()
    assert "❌ Invalid input. Please enter a number: " in text
    assert "Invalid input!\n" in text
    assert manager.render() in text


def test_menu_ends_on_end_of_input(tmp_path):
    manager = DiscountManager(tmp_path / "d.dat")
    out = io.StringIO()
    discount_admin_menu(manager, _answers(), out)
    assert out.getvalue().count("==== Discount Code Admin ====") == 1