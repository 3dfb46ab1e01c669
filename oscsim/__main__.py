from oscsim.pipeline import main

main()
