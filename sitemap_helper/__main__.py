from sitemap_helper.cli import main

main()
