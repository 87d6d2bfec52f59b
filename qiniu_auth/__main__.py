from qiniu_auth.cli import main

main()
