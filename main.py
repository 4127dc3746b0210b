from ExampleSceneDef import DefaultSphereExample, DEFAULT_OUTPUT


def main():
    example = DefaultSphereExample()
    example.render(DEFAULT_OUTPUT, verbose=True)
    print(f"saved {DEFAULT_OUTPUT}")


if __name__ == '__main__':
    main()
