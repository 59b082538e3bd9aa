"""
Unit tests for wattage estimation, PSU sizing and the build summary.
"""
import unittest

from models import CartItem, Category, Product, ProductSpecs
from power_budget import (
    compute_total_draw,
    is_dual_kit,
    psu_load,
    recommended_psu_wattage,
    summarize_build,
    total_price,
)


def item(pid, category, qty=1, price=100, name=None, **specs):
    product = Product(id=pid, name=name or pid, price=price, category=category, specs=ProductSpecs(specs))
    return CartItem(product=product, quantity=qty)


class TestTotalDraw(unittest.TestCase):

    def test_empty_build_draws_nothing(self):
        self.assertEqual(compute_total_draw([]), 0)
        self.assertEqual(recommended_psu_wattage(0), 0)

    def test_cpu_gpu_case_scenario(self):
        cart = [
            item("cpu", Category.CPU, tdp="125W"),
            item("gpu", Category.GPU, tdp="200W"),
            item("case", Category.CASE),
        ]
        draw = compute_total_draw(cart)
        self.assertEqual(draw, 365)
        self.assertEqual(recommended_psu_wattage(draw), 500)

    def test_overhead_only_with_major_component(self):
        self.assertEqual(compute_total_draw([item("ssd", Category.SSD, qty=2)]), 20)
        self.assertEqual(compute_total_draw([item("cpu", Category.CPU)]), 30)

    def test_major_component_scales_with_quantity(self):
        cart = [item("gpu", Category.GPU, qty=2, tdp="200W")]
        self.assertEqual(compute_total_draw(cart), 430)

    def test_ram_modules_and_dual_kits(self):
        single = [item("ram", Category.RAM, qty=2, name="Kingston Fury 16GB DDR5")]
        dual = [item("ram", Category.RAM, qty=1, name="Corsair Vengeance (16GBx2) DDR5")]
        dual_star = [item("ram", Category.RAM, qty=2, name="G.Skill 8GB*2 DDR4")]
        self.assertEqual(compute_total_draw(single), 30)
        self.assertEqual(compute_total_draw(dual), 30)
        self.assertEqual(compute_total_draw(dual_star), 60)

    def test_dual_kit_markers(self):
        self.assertTrue(is_dual_kit("16GBX2 kit"))
        self.assertTrue(is_dual_kit("8GB*2"))
        self.assertFalse(is_dual_kit("32GB single"))
        self.assertFalse(is_dual_kit(None))

    def test_per_unit_estimates(self):
        cart = [
            item("mb", Category.MB),
            item("aio", Category.COOLER),
            item("air", Category.AIR_COOLER),
            item("mon", Category.MONITOR),
            item("sw", Category.SOFTWARE),
            item("psu", Category.PSU, wattage="650W"),
        ]
        self.assertEqual(compute_total_draw(cart), 50 + 35 + 10)

    def test_custom_estimate_table(self):
        cart = [item("mb", Category.MB), item("mon", Category.MONITOR)]
        self.assertEqual(compute_total_draw(cart, {"Motherboard": 70, "Monitor": 25}), 95)

    def test_unparseable_tdp_counts_zero(self):
        cart = [item("cpu", Category.CPU, tdp="unknown")]
        self.assertEqual(compute_total_draw(cart), 30)


class TestPsuSizing(unittest.TestCase):

    def test_rounds_up_to_next_step(self):
        self.assertEqual(recommended_psu_wattage(1), 50)
        self.assertEqual(recommended_psu_wattage(500), 650)
        self.assertEqual(recommended_psu_wattage(10), 50)

    def test_exact_multiple_is_not_bumped(self):
        # 500 * 1.3 = 650, already a multiple of 50
        self.assertEqual(recommended_psu_wattage(500), 650)
        self.assertEqual(recommended_psu_wattage(1000, headroom_percent=0), 1000)

    def test_custom_headroom_and_step(self):
        self.assertEqual(recommended_psu_wattage(400, headroom_percent=50, step=100), 600)

    def test_load_levels(self):
        cart = [item("psu", Category.PSU, wattage="650W")]
        self.assertEqual(psu_load(365, cart)["level"], "ok")
        self.assertEqual(psu_load(365, cart)["load_percent"], 56.2)
        self.assertEqual(psu_load(500, cart)["level"], "warning")
        self.assertEqual(psu_load(600, cart)["level"], "critical")

    def test_load_without_psu_uses_recommendation(self):
        load = psu_load(365, [])
        self.assertEqual(load["installed_wattage"], 0)
        self.assertEqual(load["recommended_wattage"], 500)
        self.assertEqual(load["load_percent"], 73.0)

    def test_load_for_empty_build(self):
        load = psu_load(0, [])
        self.assertEqual(load["load_percent"], 0.0)
        self.assertEqual(load["level"], "ok")


class TestSummary(unittest.TestCase):

    def test_total_price(self):
        cart = [item("a", Category.SSD, qty=2, price=3000), item("b", Category.MONITOR, price=9000)]
        self.assertEqual(total_price(cart), 15000)
        self.assertEqual(total_price([]), 0)

    def test_summary_fields(self):
        cart = [
            item("cpu", Category.CPU, price=19800, socket="LGA1700", tdp="125W"),
            item("mb", Category.MB, price=8000, socket="AM5"),
        ]
        summary = summarize_build(cart)
        self.assertEqual([i["id"] for i in summary["items"]], ["cpu", "mb"])
        self.assertEqual(summary["build"]["CPU"], ["cpu"])
        self.assertEqual(summary["build"]["GPU"], [])
        self.assertIn("Socket mismatch", summary["diagnostics"]["cpu"])
        self.assertEqual(summary["total_draw"], 125 + 50 + 30)
        self.assertEqual(summary["recommended_psu"], 300)
        self.assertEqual(summary["total_price"], 27800)
        self.assertEqual(summary["psu"]["installed_wattage"], 0)

    def test_empty_summary(self):
        summary = summarize_build([])
        self.assertEqual(summary["items"], [])
        self.assertEqual(summary["diagnostics"], {})
        self.assertEqual(summary["total_draw"], 0)
        self.assertEqual(summary["recommended_psu"], 0)
        self.assertEqual(summary["total_price"], 0)


if __name__ == "__main__":
    unittest.main()
