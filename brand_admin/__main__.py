from brand_admin.main import main

main()
