import sys

from mcp_server_devnagri.main import main

sys.exit(main())
