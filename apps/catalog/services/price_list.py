"""Standard RSL linen price list, grouped by section."""

from decimal import Decimal
from typing import Dict

from ..models import CategorySection


PRICE_LIST_BY_SECTION: Dict[str, Dict[str, Decimal]] = {
    CategorySection.FRONT_OF_HOUSE: {
        'Napkins': Decimal('2.73'),
        'Overlays - Extra Large': Decimal('7.74'),
        'Overlays - Large': Decimal('6.60'),
        'Overlays - Medium': Decimal('5.72'),
        'Overlays - Small': Decimal('5.28'),
        'Round Tablecloths - Large': Decimal('6.50'),
        'Round Tablecloths - Medium': Decimal('5.72'),
        'Round Tablecloths - Small': Decimal('5.28'),
        'Tablecloths - Large': Decimal('6.60'),
        'Tablecloths - Medium': Decimal('5.72'),
        'Tablecloths - Small': Decimal('5.28'),
        'Waiter Aprons': Decimal('4.40'),
        'Waiter Bibs': Decimal('4.40'),
    },
    CategorySection.HOUSEKEEPING: {
        'Bath Mats': Decimal('12.81'),
        'Blanket': Decimal('11.80'),
        'Curtain': Decimal('145.20'),
        'Cushion Cover': Decimal('11.62'),
        'Duvet Covers - Cot': Decimal('7.57'),
        'Duvet Covers - Double': Decimal('11.44'),
        'Duvet Covers - King': Decimal('15.31'),
        'Duvet Covers - Queen': Decimal('13.38'),
        'Duvet Covers - Single': Decimal('9.50'),
        'Duvet Inner - King': Decimal('48.40'),
        'Duvet Inner - Single': Decimal('29.04'),
        'Fitted Sheet - 3/4': Decimal('7.92'),
        'Fitted Sheet - Cot': Decimal('5.37'),
        'Fitted Sheet - Double': Decimal('8.10'),
        'Fitted Sheet - King': Decimal('10.30'),
        'Fitted Sheet - Queen': Decimal('9.06'),
        'Fitted Sheet - Single': Decimal('6.60'),
        'Flat Sheet - 3/4': Decimal('7.92'),
        'Flat Sheet - Cot': Decimal('5.37'),
        'Flat Sheet - Double': Decimal('8.10'),
        'Flat Sheet - King': Decimal('10.30'),
        'Flat Sheet - Queen': Decimal('9.06'),
        'Flat Sheet - Single': Decimal('6.60'),
        'Pillow Cases - Continental (Square)': Decimal('5.10'),
        'Pillow Cases - Standard': Decimal('4.84'),
        'Spa Gown': Decimal('15.75'),
        'Towels - Bath Sheet': Decimal('10.56'),
        'Towels - Bath Towel': Decimal('8.62'),
        'Towels - Extra Large': Decimal('15.05'),
        'Towels - Face Cloth': Decimal('3.78'),
        'Towels - Gym Towel': Decimal('6.60'),
        'Towels - Hand Towel': Decimal('6.60'),
        'Towels - Head Band': Decimal('3.08'),
        'Towels - Pool Towel': Decimal('15.05'),
    },
    CategorySection.KITCHEN: {
        'Chefs Aprons': Decimal('5.37'),
        'Chefs Jackets': Decimal('5.81'),
        'Chefs T-Shirts': Decimal('4.66'),
        'Chefs Trousers': Decimal('5.81'),
        'Kitchen Cloths': Decimal('4.40'),
    },
}

# Flat name -> price view
PRICE_LIST: Dict[str, Decimal] = {
    name: price
    for section in PRICE_LIST_BY_SECTION.values()
    for name, price in section.items()
}

# Common shorthand used on paper batch sheets
CATEGORY_ALIASES: Dict[str, str] = {
    # Towels
    'bath towels': 'Towels - Bath Towel',
    'bath towel': 'Towels - Bath Towel',
    'hand towels': 'Towels - Hand Towel',
    'hand towel': 'Towels - Hand Towel',
    'pool towels': 'Towels - Pool Towel',
    'pool towel': 'Towels - Pool Towel',
    'face cloth': 'Towels - Face Cloth',
    'gym towels': 'Towels - Gym Towel',
    'gym towel': 'Towels - Gym Towel',
    'bath sheet': 'Towels - Bath Sheet',
    # Sheets
    'bed sheets': 'Fitted Sheet - Double',
    'bed sheet': 'Fitted Sheet - Double',
    # Duvet covers
    'duvet covers': 'Duvet Covers - Double',
    'duvet cover': 'Duvet Covers - Double',
    # Pillow cases
    'pillow cases': 'Pillow Cases - Standard',
    'pillow case': 'Pillow Cases - Standard',
    'pillowcases': 'Pillow Cases - Standard',
    'pillowcase': 'Pillow Cases - Standard',
    # Tablecloths
    'tablecloths': 'Tablecloths - Medium',
    'tablecloth': 'Tablecloths - Medium',
    # Others
    'napkin': 'Napkins',
    'bath mat': 'Bath Mats',
    'bathmats': 'Bath Mats',
    'bathmat': 'Bath Mats',
}

