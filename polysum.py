from cli.main import polysum_cli


if __name__ == '__main__':
    polysum_cli()
