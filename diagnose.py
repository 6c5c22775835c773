
import logging
import os
import sys

# Add project root to path
sys.path.append(os.getcwd())

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

try:
    from trade_charges.core.entities.trade import TradeLeg
    from trade_charges.core.use_cases.charge_calculator import compute_charges
    from trade_charges.core.use_cases.pnl_calculator import compute_pnl
    from trade_charges.api.summary import calculate_profit_loss
    print("✅ All imports successful.")
except Exception as e:
    print(f"❌ Import failed: {e}")
    sys.exit(1)

# Known delivery BUY: 100 x 1000 -> ~201.34 charges
def check_delivery_charges():
    try:
        charges = compute_charges(100, 1000, "BUY", "ROLLING T1")
        if abs(charges.total_charges - 201.34) < 0.01:
            print("✅ Delivery charge calculation passed.")
        else:
            print(f"❌ Delivery charges off, expected ~201.34, got {charges.total_charges}")
    except Exception as e:
        print(f"❌ Charge calculation raised exception: {e}")

def check_round_trip():
    try:
        result = compute_pnl(TradeLeg.buy(50, 200, "INTRADAY"), TradeLeg.sell(50, 210, "INTRADAY"))
        summary = calculate_profit_loss(50, 200, "INTRADAY", 50, 210, "INTRADAY")
        print(f"   gross={summary.gross_pl} charges={summary.total_charges} "
              f"net={summary.net_pl} loaded={summary.loaded_rate}")
        if result.gross_profit == 500 and summary.outcome.value == "profit":
            print("✅ Round-trip P&L passed.")
        else:
            print(f"❌ Round-trip P&L failed: {result}")
    except Exception as e:
        print(f"❌ Round-trip raised exception: {e}")

if __name__ == "__main__":
    check_delivery_charges()
    check_round_trip()
