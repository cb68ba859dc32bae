from create_taujs.cli import create_taujs

if __name__ == "__main__":
    create_taujs()
