from bread_order.main import run

if __name__ == "__main__":
    run()
