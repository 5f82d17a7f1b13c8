"""Demo investments used by DemoInvestmentService."""

from datetime import date

from investments_ui.models.investment import Investment

DEMO_INVESTMENTS: tuple[Investment, ...] = (
    Investment(1, "Tesouro Selic 2029", "Ações", 5000.0, date(2024, 1, 15)),
    Investment(2, "Apê Centro", "Imóveis", 350000.0, date(2023, 6, 2)),
    Investment(3, "Bitcoin", "Criptomoedas", 12000.5, date(2024, 3, 8)),
    Investment(4, "PETR4", "Ações", 2300.0, date(2024, 2, 20)),
    Investment(5, "Sala Comercial Paulista", "Imóveis", 480000.0, date(2022, 11, 30)),
    Investment(6, "Ethereum", "Criptomoedas", 7400.0, date(2024, 4, 1)),
    Investment(7, "VALE3", "Ações", 3150.75, date(2023, 9, 12)),
    Investment(8, "Casa de Praia", "Imóveis", 620000.0, date(2021, 12, 5)),
    Investment(9, "Solana", "Criptomoedas", 1800.0, date(2024, 5, 18)),
    Investment(10, "ITUB4", "Ações", 4100.0, date(2024, 6, 3)),
    Investment(11, "Terreno Interior", "Imóveis", 95000.0, date(2020, 8, 21)),
    Investment(12, "Cardano", "Criptomoedas", 650.0, date(2024, 7, 9)),
)
