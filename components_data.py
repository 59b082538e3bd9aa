
# --------------------------
# default catalog
# --------------------------
# Grouped by category key, then by product id. Prices are whole currency units.

data = {
    "cpu": {
        "cpu-1": {
            "name": "Intel Core i9-14900K",
            "category": "CPU",
            "price": 19800,
            "description": "24C/32T 3.2GHz (6.0GHz boost) / 36MB / UHD770 / 125W",
            "specDetails": {"brand": "Intel", "socket": "LGA1700", "chipset": "Z790", "tdp": "125W"}
        },
        "cpu-2": {
            "name": "Intel Core i7-14700K",
            "category": "CPU",
            "price": 14500,
            "description": "20C/28T 3.4GHz (5.6GHz boost) / 33MB / UHD770 / 125W",
            "specDetails": {"brand": "Intel", "socket": "LGA1700", "chipset": "Z790", "tdp": "125W"}
        },
        "cpu-3": {
            "name": "Intel Core i5-12400F",
            "category": "CPU",
            "price": 4200,
            "description": "6C/12T 2.5GHz (4.4GHz boost) / 18MB / no iGPU / 65W",
            "specDetails": {"brand": "Intel", "socket": "LGA1700", "chipset": "B760", "tdp": "65W"}
        },
        "cpu-4": {
            "name": "AMD Ryzen 9 7950X",
            "category": "CPU",
            "price": 18500,
            "description": "16C/32T 4.5GHz (5.7GHz boost) / 64MB / RDNA2 / 170W",
            "specDetails": {"brand": "AMD", "socket": "AM5", "chipset": "X670", "tdp": "170W"}
        },
        "cpu-5": {
            "name": "AMD Ryzen 7 7800X3D",
            "category": "CPU",
            "price": 13800,
            "description": "8C/16T 4.2GHz (5.0GHz boost) / 96MB / RDNA2 / 120W",
            "specDetails": {"brand": "AMD", "socket": "AM5", "chipset": "B650", "tdp": "120W"}
        }
    },
    "motherboard": {
        "mb-1": {
            "name": "ASUS ROG MAXIMUS Z790 HERO",
            "category": "Motherboard",
            "price": 19990,
            "description": "LGA1700 / DDR5 / ATX / Wi-Fi 6E / 5G LAN / Thunderbolt 4",
            "specDetails": {"brand": "ASUS", "socket": "LGA1700", "chipset": "Z790", "type": "ATX", "memoryType": "DDR5"}
        },
        "mb-2": {
            "name": "Gigabyte B760M AORUS ELITE",
            "category": "Motherboard",
            "price": 5490,
            "description": "LGA1700 / DDR4 / mATX / 2.5G LAN",
            "specDetails": {"brand": "Gigabyte", "socket": "LGA1700", "chipset": "B760", "type": "MATX", "memoryType": "DDR4"}
        },
        "mb-3": {
            "name": "Gigabyte X670E AORUS MASTER",
            "category": "Motherboard",
            "price": 15990,
            "description": "AM5 / DDR5 / E-ATX / Wi-Fi 6E / 10G LAN",
            "specDetails": {"brand": "Gigabyte", "socket": "AM5", "chipset": "X670", "type": "EATX", "memoryType": "DDR5"}
        },
        "mb-4": {
            "name": "ASUS TUF GAMING B650-PLUS",
            "category": "Motherboard",
            "price": 6290,
            "description": "AM5 / DDR5 / ATX / 2.5G LAN",
            "specDetails": {"brand": "ASUS", "socket": "AM5", "chipset": "B650", "type": "ATX", "memoryType": "DDR5"}
        }
    },
    "gpu": {
        "gpu-1": {
            "name": "ASUS ROG RTX 4090 O24G",
            "category": "GPU",
            "price": 62000,
            "description": "24GB GDDR6X / 358mm / triple fan / 3.5 slot",
            "specDetails": {"brand": "NVIDIA", "series": "RTX 40 Series", "vram": "24GB", "tdp": "450W", "gpuLength": "358mm"}
        },
        "gpu-2": {
            "name": "Gigabyte RTX 4060 EAGLE OC",
            "category": "GPU",
            "price": 10990,
            "description": "8GB GDDR6 / 242mm / triple fan / dual slot",
            "specDetails": {"brand": "NVIDIA", "series": "RTX 40 Series", "vram": "8GB", "tdp": "115W", "gpuLength": "242mm"}
        },
        "gpu-3": {
            "name": "Gigabyte RTX 4070 EAGLE OC",
            "category": "GPU",
            "price": 20990,
            "description": "12GB GDDR6X / 261mm / triple fan",
            "specDetails": {"brand": "NVIDIA", "series": "RTX 40 Series", "vram": "12GB", "tdp": "200W", "gpuLength": "261mm"}
        }
    },
    "ram": {
        "ram-1": {
            "name": "G.SKILL Trident Z5 RGB 32GB (16GBx2)",
            "category": "RAM",
            "price": 4500,
            "description": "DDR5-6000 / CL30 / black-silver",
            "specDetails": {"type": "DDR5", "capacity": "32GB"}
        },
        "ram-2": {
            "name": "Kingston Fury Beast 16GB (8GBx2)",
            "category": "RAM",
            "price": 1600,
            "description": "DDR4-3200 / CL16 / black",
            "specDetails": {"type": "DDR4", "capacity": "16GB"}
        },
        "ram-3": {
            "name": "Kingston Fury Beast 32GB",
            "category": "RAM",
            "price": 3200,
            "description": "DDR5-6000 / CL30 / black",
            "specDetails": {"type": "DDR5", "capacity": "32GB"}
        }
    },
    "ssd": {
        "ssd-1": {
            "name": "Samsung 990 PRO 2TB",
            "category": "SSD",
            "price": 5800,
            "description": "M.2 PCIe 4.0 / 7450MB/s read / 6900MB/s write / TLC",
            "specDetails": {"capacity": "2TB", "type": "M.2 NVMe"}
        },
        "ssd-2": {
            "name": "Samsung 990 PRO 1TB",
            "category": "SSD",
            "price": 4500,
            "description": "M.2 PCIe 4.0 / 7450MB/s read / 6900MB/s write",
            "specDetails": {"capacity": "1TB", "type": "M.2 NVMe"}
        }
    },
    "case": {
        "case-1": {
            "name": "NZXT H9 Flow",
            "category": "Case",
            "price": 5990,
            "description": "Dual chamber / panoramic glass / ATX / 4 fans included / white",
            "specDetails": {"brand": "NZXT", "type": "ATX", "radiatorSupport": "360mm", "coolerHeight": "165mm", "gpuLength": "435mm"}
        },
        "case-2": {
            "name": "Cooler Master NR200P",
            "category": "Case",
            "price": 2890,
            "description": "Mini-ITX / tempered glass / compact",
            "specDetails": {"brand": "Cooler Master", "type": "ITX", "radiatorSupport": "280mm", "coolerHeight": "155mm", "gpuLength": "330mm"}
        }
    },
    "psu": {
        "psu-1": {
            "name": "Seasonic Vertex GX-1000",
            "category": "PSU",
            "price": 6490,
            "description": "1000W / 80+ Gold / fully modular / ATX 3.0 / 10-year warranty",
            "specDetails": {"wattage": "1000W", "brand": "Seasonic", "efficiency": "80+ Gold"}
        },
        "psu-2": {
            "name": "Seasonic Focus GX-650",
            "category": "PSU",
            "price": 2990,
            "description": "650W / 80+ Gold / fully modular",
            "specDetails": {"wattage": "650W", "brand": "Seasonic", "efficiency": "80+ Gold"}
        }
    },
    "liquid_cooler": {
        "cooler-1": {
            "name": "NZXT Kraken Elite 360",
            "category": "Liquid Cooler",
            "price": 9990,
            "description": "360mm / 2.36in LCD / FDB fans / 6-year warranty",
            "specDetails": {"type": "AIO", "brand": "NZXT", "size": "360mm", "coolerHeight": "52mm"}
        }
    },
    "air_cooler": {
        "ac-1": {
            "name": "Noctua NH-D15",
            "category": "Air Cooler",
            "price": 3690,
            "description": "Dual tower / dual fan / 6 heatpipes",
            "specDetails": {"brand": "Noctua", "coolerHeight": "165mm", "socket": "LGA1700, AM5"}
        },
        "ac-2": {
            "name": "Thermalright Peerless Assassin 120",
            "category": "Air Cooler",
            "price": 1390,
            "description": "Dual tower / dual fan / 6 heatpipes",
            "specDetails": {"brand": "Thermalright", "coolerHeight": "157mm", "socket": "LGA1700, AM4, AM5"}
        }
    },
    "monitor": {
        "mon-1": {
            "name": "ASUS ROG Swift OLED PG27AQDM",
            "category": "Monitor",
            "price": 29900,
            "description": "27in / 2K / OLED / 240Hz / 0.03ms",
            "specDetails": {"brand": "ASUS", "size": "27\"", "resolution": "2K", "panelType": "Flat", "refreshRate": "240Hz"}
        },
        "mon-2": {
            "name": "BenQ GW2480 Plus",
            "category": "Monitor",
            "price": 3288,
            "description": "24in / FHD / IPS / eye care",
            "specDetails": {"brand": "BenQ", "size": "24\"", "resolution": "FHD", "panelType": "Flat", "refreshRate": "60Hz"}
        }
    },
    "software": {
        "sw-1": {
            "name": "Windows 11 Home OEM",
            "category": "Software",
            "price": 3990,
            "description": "64-bit",
            "specDetails": {"brand": "Microsoft", "licenseType": "OEM"}
        },
        "sw-2": {
            "name": "Office 2021 Home & Student",
            "category": "Software",
            "price": 4390,
            "description": "Perpetual license / Word, Excel, PowerPoint",
            "specDetails": {"brand": "Microsoft", "licenseType": "Retail"}
        }
    }
}
