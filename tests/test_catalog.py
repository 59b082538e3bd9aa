"""
Unit tests for product validation, CSV import and the persisted catalog.
"""
import json
import os
import tempfile
import unittest

from catalog import (
    CatalogStore,
    default_products,
    parse_products_csv,
    rows_to_products,
    validate_product_record,
)
from models import Category, Product, ProductSpecs

CSV_TEXT = """\
# supplier price list
id,name,price,category,socket,tdp
cpu-1,Intel Core i9-14900K,"$20,500",CPU,LGA1700,125W
,AMD Ryzen 5 7600,11000,CPU,AM5,65W
// discontinued lines below are kept for reference
bad-1,,1000,CPU,,
bad-2,Thing,abc,CPU,,
bad-3,Thing,100,Toaster,,
"""


def make_product(pid, name, category=Category.CPU, price=1000, **specs):
    return Product(id=pid, name=name, price=price, category=category, specs=ProductSpecs(specs))


class TestValidation(unittest.TestCase):

    def good(self, **overrides):
        record = {"id": "x", "name": "Thing", "price": 100, "category": "SSD"}
        record.update(overrides)
        return record

    def test_valid_record(self):
        self.assertIsNone(validate_product_record(self.good()))
        self.assertIsNone(validate_product_record(self.good(category="AIR_COOLER", price=0)))
        self.assertIsNone(validate_product_record(self.good(specDetails={"capacity": "1TB"})))

    def test_reasons(self):
        self.assertEqual(validate_product_record(self.good(name="  ")), "missing name")
        self.assertIn("invalid price", validate_product_record(self.good(price="100")))
        self.assertIn("invalid price", validate_product_record(self.good(price=True)))
        self.assertIn("whole non-negative", validate_product_record(self.good(price=-1)))
        self.assertIn("whole non-negative", validate_product_record(self.good(price=9.5)))
        self.assertIn("invalid category", validate_product_record(self.good(category="Toaster")))
        self.assertEqual(validate_product_record(self.good(specDetails=["x"])), "specDetails must be an object")
        self.assertEqual(validate_product_record("nope"), "record must be an object")


class TestCsvImport(unittest.TestCase):

    def setUp(self):
        self.existing = [make_product("cpu-1", "Intel Core i9-14900K", price=19800)]

    def test_rows_are_classified(self):
        rows = parse_products_csv(CSV_TEXT, self.existing)
        self.assertEqual([r.status for r in rows], ["update", "new", "error", "error", "error"])

        update = rows[0]
        self.assertEqual(update.record["price"], 20500)
        self.assertEqual(update.original_price, 19800)
        self.assertEqual(update.record["specDetails"], {"socket": "LGA1700", "tdp": "125W"})

        new = rows[1]
        self.assertTrue(new.record["id"].endswith("-1"))
        self.assertIsNone(new.original_price)

        self.assertEqual(rows[2].error, "missing name")
        self.assertIn("invalid price", rows[3].error)
        self.assertIn("invalid category", rows[4].error)

    def test_rows_to_products_keeps_valid_rows(self):
        products = rows_to_products(parse_products_csv(CSV_TEXT, self.existing))
        self.assertEqual(len(products), 2)
        self.assertEqual(products[0].specs.socket, "LGA1700")
        self.assertEqual(products[1].category, Category.CPU)

    def test_match_by_name(self):
        text = "name,price,category\n intel core i9-14900k ,18000,CPU\n"
        rows = parse_products_csv(text, self.existing, match_by_name=True)
        self.assertEqual(rows[0].status, "update")
        self.assertEqual(rows[0].record["id"], "cpu-1")

        rows = parse_products_csv(text, self.existing)
        self.assertEqual(rows[0].status, "new")

    def test_blank_lines_skipped(self):
        text = "name,price,category\nA,1,SSD\n,,\nB,2,SSD\n"
        self.assertEqual(len(parse_products_csv(text, [])), 2)

    def test_header_errors(self):
        with self.assertRaises(ValueError):
            parse_products_csv("", [])
        with self.assertRaises(ValueError):
            parse_products_csv("name,price,category\n", [])
        with self.assertRaises(ValueError):
            parse_products_csv("id,name,category\nx,y,CPU\n", [])

    def test_preview_dict(self):
        row = parse_products_csv(CSV_TEXT, self.existing)[0].to_dict()
        self.assertEqual(row["status"], "update")
        self.assertEqual(row["originalPrice"], 19800)


class TestCatalogStore(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "catalog.json")
        self.seed = [
            make_product("cpu-1", "Intel Core i9-14900K", price=19800, socket="LGA1700"),
            make_product("ssd-1", "Samsung 990 PRO 1TB", Category.SSD, 6200),
        ]

    def tearDown(self):
        self._tmp.cleanup()

    def test_defaults_when_file_missing(self):
        store = CatalogStore(self.path)
        self.assertEqual(len(store.list()), len(default_products()))
        self.assertEqual(store.get("cpu-1").specs.socket, "LGA1700")
        self.assertIsNone(store.get("nope"))

    def test_bundled_catalog_is_valid(self):
        products = default_products()
        self.assertEqual(len({p.id for p in products}), len(products))
        self.assertTrue(any(p.category == Category.AIR_COOLER for p in products))

    def test_upsert_stamps_and_persists(self):
        store = CatalogStore(self.path, seed=self.seed)
        ok, _ = store.upsert(make_product("gpu-9", "RTX 4060", Category.GPU, 17000))
        self.assertTrue(ok)
        self.assertIsNotNone(store.get("gpu-9").last_updated)

        reloaded = CatalogStore(self.path)
        self.assertEqual([p.id for p in reloaded.list()], ["cpu-1", "ssd-1", "gpu-9"])

    def test_upsert_replaces_in_place(self):
        store = CatalogStore(self.path, seed=self.seed)
        store.upsert(make_product("cpu-1", "Intel Core i9-14900K", price=18000))
        self.assertEqual([p.id for p in store.list()], ["cpu-1", "ssd-1"])
        self.assertEqual(store.get("cpu-1").price, 18000)

    def test_delete(self):
        store = CatalogStore(self.path, seed=self.seed)
        self.assertEqual(store.delete("ssd-1"), (True, "ok"))
        self.assertEqual(store.delete("ssd-1"), (False, "product not found: ssd-1"))
        self.assertEqual([p.id for p in CatalogStore(self.path).list()], ["cpu-1"])

    def test_failed_write_leaves_catalog_unchanged(self):
        blocker = os.path.join(self._tmp.name, "blocker")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("not a directory")
        store = CatalogStore(os.path.join(blocker, "catalog.json"), seed=self.seed)
        ok, msg = store.upsert(make_product("gpu-9", "RTX 4060", Category.GPU))
        self.assertFalse(ok)
        self.assertIn("catalog write failed", msg)
        self.assertEqual([p.id for p in store.list()], ["cpu-1", "ssd-1"])

    def test_invalid_stored_records_skipped(self):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([
                {"id": "ok", "name": "Fine", "price": 10, "category": "SSD"},
                {"id": "broken", "name": "Bad", "price": "ten", "category": "SSD"},
                {"name": "No id", "price": 1, "category": "CPU"},
                {"id": "  ", "name": "Blank id", "price": 1, "category": "CPU"},
                "not a record",
            ], f)
        self.assertEqual([p.id for p in CatalogStore(self.path).list()], ["ok"])

    def test_reset_to_default(self):
        store = CatalogStore(self.path, seed=self.seed)
        ok, _ = store.reset_to_default()
        self.assertTrue(ok)
        self.assertEqual(len(store.list()), len(default_products()))
        self.assertTrue(all(p.last_updated for p in store.list()))


if __name__ == "__main__":
    unittest.main()
