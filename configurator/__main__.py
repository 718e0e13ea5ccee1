from configurator.orchestrator import main

main()
